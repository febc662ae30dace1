from brightsmile.content import CLINIC, FAQS, LEGAL_LINKS, NAV_LINKS, SERVICES, TEAM


def test_phone_and_email_links():
    assert CLINIC.phone_href == "tel:+15550142290"
    assert CLINIC.email_href == "mailto:hello@brightsmile.example"


def test_navigation_routes_are_unique_and_absolute():
    routes = [link.href for link in NAV_LINKS + LEGAL_LINKS]

    assert len(routes) == len(set(routes))
    assert all(route.startswith("/") for route in routes)
    assert routes[0] == "/"


def test_service_slugs_are_unique():
    slugs = [service.slug for service in SERVICES]

    assert len(slugs) == len(set(slugs))
    assert all(service.icon for service in SERVICES)


def test_static_copy_is_present():
    assert TEAM and FAQS
    assert all(entry.question.endswith("?") for entry in FAQS)
    assert CLINIC.hours[-1] == ("Sunday", "Closed")


def test_copyright_year_is_fixed_content():
    from brightsmile.content import COPYRIGHT_YEAR

    assert COPYRIGHT_YEAR == 2026
