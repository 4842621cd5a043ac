"""Built-in optimization presets shipped with the tool.

Order is the display order and is preserved wherever presets are listed.
"""

from schemas import OptimizationOptions, OptimizationPreset

BUILT_IN_PRESETS: tuple[OptimizationPreset, ...] = (
    OptimizationPreset(
        id="ecommerce",
        name="E-commerce",
        description="Optimized for product photos on webshops",
        icon="🛒",
        is_built_in=True,
        options=OptimizationOptions(
            format="webp", quality=0.85, max_width_or_height=1200, max_size_kb=300
        ),
    ),
    OptimizationPreset(
        id="blog",
        name="Blog",
        description="Perfect for blog posts and articles",
        icon="📝",
        is_built_in=True,
        options=OptimizationOptions(
            format="webp", quality=0.8, max_width_or_height=1600, max_size_kb=500
        ),
    ),
    OptimizationPreset(
        id="hero",
        name="Hero Image",
        description="High quality for hero sections and banners",
        icon="🖼️",
        is_built_in=True,
        options=OptimizationOptions(
            format="webp", quality=0.9, max_width_or_height=2400, max_size_kb=1000
        ),
    ),
    OptimizationPreset(
        id="instagram",
        name="Instagram",
        description="Optimized for Instagram posts (1080px)",
        icon="📸",
        is_built_in=True,
        options=OptimizationOptions(
            format="jpeg", quality=0.9, max_width_or_height=1080, preserve_exif=False
        ),
    ),
    OptimizationPreset(
        id="thumbnail",
        name="Thumbnail",
        description="Small images for grids and galleries",
        icon="🔲",
        is_built_in=True,
        options=OptimizationOptions(
            format="webp", quality=0.75, max_width_or_height=400, max_size_kb=50
        ),
    ),
    OptimizationPreset(
        id="email",
        name="Email",
        description="Optimized for email newsletters",
        icon="✉️",
        is_built_in=True,
        options=OptimizationOptions(
            format="jpeg", quality=0.8, max_width_or_height=600, max_size_kb=100
        ),
    ),
    OptimizationPreset(
        id="high-quality",
        name="High Quality",
        description="Maximum quality, larger files",
        icon="✨",
        is_built_in=True,
        options=OptimizationOptions(
            format="avif", quality=0.95, max_width_or_height=4096
        ),
    ),
    OptimizationPreset(
        id="web-optimized",
        name="Web Optimized",
        description="Balanced quality and file size for web",
        icon="🌐",
        is_built_in=True,
        options=OptimizationOptions(
            format="webp", quality=0.8, max_width_or_height=1920, max_size_kb=500
        ),
    ),
)

BUILT_IN_IDS = frozenset(p.id for p in BUILT_IN_PRESETS)


def is_built_in_id(preset_id: str) -> bool:
    return preset_id in BUILT_IN_IDS
