"""Static copy and navigation data rendered by the pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class NavLink:
    label: str
    href: str


@dataclass(frozen=True)
class Service:
    slug: str
    name: str
    summary: str
    icon: str


@dataclass(frozen=True)
class TeamMember:
    name: str
    role: str
    bio: str
    photo: str


@dataclass(frozen=True)
class FaqEntry:
    question: str
    answer: str


@dataclass(frozen=True)
class ClinicInfo:
    name: str
    tagline: str
    phone: str
    email: str
    address: Tuple[str, ...]
    hours: Tuple[Tuple[str, str], ...]
    map_url: str
    hero_poster: str = "/images/hero-poster.jpg"
    emergency_note: str = ""
    socials: Tuple[NavLink, ...] = field(default_factory=tuple)

    @property
    def phone_href(self) -> str:
        digits = "".join(ch for ch in self.phone if ch.isdigit() or ch == "+")
        return f"tel:{digits}"

    @property
    def email_href(self) -> str:
        return f"mailto:{self.email}"


COPYRIGHT_YEAR = 2026

CLINIC = ClinicInfo(
    name="Bright Smile Dental",
    tagline="Gentle, modern dentistry for the whole family.",
    phone="+1 (555) 014-2290",
    email="hello@brightsmile.example",
    address=("128 Orchard Lane", "Suite 4", "Springfield"),
    hours=(
        ("Monday - Thursday", "8:00 - 18:00"),
        ("Friday", "8:00 - 15:00"),
        ("Saturday", "9:00 - 13:00 (by appointment)"),
        ("Sunday", "Closed"),
    ),
    map_url="https://www.openstreetmap.org/search?query=128%20Orchard%20Lane%20Springfield",
    emergency_note="Dental emergency outside opening hours? Call us and follow the recorded instructions.",
    socials=(
        NavLink("Facebook", "https://facebook.com/brightsmiledental"),
        NavLink("Instagram", "https://instagram.com/brightsmiledental"),
    ),
)

NAV_LINKS: List[NavLink] = [
    NavLink("Home", "/"),
    NavLink("About", "/about"),
    NavLink("Services", "/services"),
    NavLink("Team", "/team"),
    NavLink("FAQ", "/faq"),
    NavLink("Contact", "/contact"),
]

LEGAL_LINKS: List[NavLink] = [
    NavLink("Privacy Policy", "/privacy"),
    NavLink("Terms of Use", "/terms"),
]

SERVICES: List[Service] = [
    Service(
        "checkups",
        "Check-ups & Cleaning",
        "Thorough examinations, digital X-rays and professional hygiene visits every six months.",
        "stethoscope",
    ),
    Service(
        "whitening",
        "Teeth Whitening",
        "In-chair and take-home whitening plans tailored to sensitive teeth.",
        "sparkles",
    ),
    Service(
        "implants",
        "Dental Implants",
        "Permanent replacements for missing teeth, planned with 3D imaging.",
        "anchor",
    ),
    Service(
        "orthodontics",
        "Clear Aligners",
        "Discreet orthodontic treatment for teens and adults.",
        "smile",
    ),
    Service(
        "pediatric",
        "Children's Dentistry",
        "Friendly first visits, sealants and fluoride care for young patients.",
        "baby",
    ),
    Service(
        "emergency",
        "Emergency Care",
        "Same-day appointments for toothache, broken teeth and lost fillings.",
        "siren",
    ),
]

TEAM: List[TeamMember] = [
    TeamMember(
        "Dr. Amelia Hart",
        "Lead Dentist",
        "Twenty years of general and cosmetic dentistry with a focus on anxious patients.",
        "/images/team/amelia-hart.jpg",
    ),
    TeamMember(
        "Dr. Ravi Menon",
        "Implantologist",
        "Specialises in implant surgery and full-mouth restorations.",
        "/images/team/ravi-menon.jpg",
    ),
    TeamMember(
        "Lena Ortiz",
        "Dental Hygienist",
        "Keeps cleanings comfortable and explains every step along the way.",
        "/images/team/lena-ortiz.jpg",
    ),
    TeamMember(
        "Marcus Webb",
        "Practice Manager",
        "Your contact for appointments, insurance questions and payment plans.",
        "/images/team/marcus-webb.jpg",
    ),
]

FAQS: List[FaqEntry] = [
    FaqEntry(
        "Do you accept new patients?",
        "Yes. Call or email us and we will book your first examination within the week.",
    ),
    FaqEntry(
        "Which insurance plans do you work with?",
        "We work with most major dental insurers and can bill them directly. Bring your card to the first visit.",
    ),
    FaqEntry(
        "How often should I have a check-up?",
        "Every six months for most adults. We will recommend a different interval if your situation needs it.",
    ),
    FaqEntry(
        "Is teeth whitening safe?",
        "Professional whitening under supervision is safe for healthy teeth and gums. We check first.",
    ),
    FaqEntry(
        "What should I do in a dental emergency?",
        "Call us straight away. We keep same-day slots free for emergencies during opening hours.",
    ),
]

ABOUT_PARAGRAPHS: List[str] = [
    "Bright Smile Dental opened in 2009 with one chair and a simple idea: "
    "dentistry should feel calm, honest and unhurried.",
    "Today our team of dentists and hygienists cares for more than four "
    "thousand families, using digital imaging and minimally invasive techniques "
    "wherever possible.",
    "We explain every treatment option and its cost before we begin, so you "
    "can decide with confidence.",
]

PRIVACY_SECTIONS: List[Tuple[str, str]] = [
    (
        "What we collect",
        "This website does not use accounts, forms or analytics. The only value "
        "stored in your browser is your light or dark display preference.",
    ),
    (
        "Patient records",
        "Clinical records are kept in our practice management system and are never "
        "shared without your written consent, except where the law requires it.",
    ),
    (
        "Contact",
        "Questions about your data can be sent to our practice manager by email.",
    ),
]

TERMS_SECTIONS: List[Tuple[str, str]] = [
    (
        "Information only",
        "The content of this website is general information and does not replace "
        "an examination by a dentist.",
    ),
    (
        "Appointments",
        "Appointments are confirmed by phone or email. Please give 24 hours notice "
        "if you need to cancel.",
    ),
    (
        "Changes",
        "We may update these terms from time to time. The current version is always "
        "published on this page.",
    ),
]
