from .footer import site_footer
from .header import display_choice, site_header, theme_toggle
from .hero import hero

__all__ = ["display_choice", "hero", "site_footer", "site_header", "theme_toggle"]
