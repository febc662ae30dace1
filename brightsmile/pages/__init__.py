from .about import about
from .contact import contact
from .faq import faq
from .home import home
from .legal import privacy, terms
from .services import services
from .team import team

# route, page, title
PAGES = [
    ("/", home, "Home"),
    ("/about", about, "About"),
    ("/services", services, "Services"),
    ("/team", team, "Our Team"),
    ("/faq", faq, "FAQ"),
    ("/contact", contact, "Contact"),
    ("/privacy", privacy, "Privacy Policy"),
    ("/terms", terms, "Terms of Use"),
]

__all__ = [
    "PAGES",
    "about",
    "contact",
    "faq",
    "home",
    "privacy",
    "services",
    "team",
    "terms",
]
