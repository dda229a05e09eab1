# fontsync/naming.py
"""Local file names for mirrored resources and stylesheets."""

FONT_EXT = ".woff2"
CSS_EXT = ".css"


def safe_family(family: str) -> str:
    return family.replace(" ", "-")


def font_filename(family: str, version: str, subset: str, weight: str, style: str = "") -> str:
    """
    family-version-subset-weight[style].woff2

    `style` is "" for upright faces, so "Open Sans" v40 latin 700 italic
    gives "Open-Sans-v40-latin-700italic.woff2".
    """
    return "-".join([safe_family(family), version, subset, str(weight)]) + style + FONT_EXT


def subset_stylesheet_filename(family: str, version: str, subset: str) -> str:
    return "-".join([safe_family(family), version, subset]) + CSS_EXT


def combined_stylesheet_filename(family: str, version: str) -> str:
    return subset_stylesheet_filename(family, version, "all")
