"""
tests.test_domains

Governance domain contract tests against the fake server.
"""

from __future__ import annotations

from governance_program.client import GovernanceProgramClient
from governance_program.properties.governance import GovernanceDomainProperties

USER_ID = "garygeeke"


def _domain(identifier: int, name: str) -> GovernanceDomainProperties:
    return GovernanceDomainProperties(
        qualified_name=f"GovernanceDomain:{name}",
        domain_identifier=identifier,
        display_name=name,
    )


def test_no_domains_is_an_empty_list(server_client: GovernanceProgramClient) -> None:
    assert server_client.domains.get_governance_domains(USER_ID) == []


def test_created_domains_are_listed_and_paged(server_client: GovernanceProgramClient) -> None:
    domains = server_client.domains
    guids = [domains.create_governance_domain(USER_ID, _domain(n, name)) for n, name in enumerate(["All", "Data", "Privacy"])]

    listed = domains.get_governance_domains(USER_ID)
    first_page = domains.get_governance_domains(USER_ID, 0, 2)
    past_the_end = domains.get_governance_domains(USER_ID, 3, 2)

    assert [d.element_header.guid for d in listed] == guids
    assert [d.properties.display_name for d in first_page] == ["All", "Data"]
    assert past_the_end == []


def test_domain_identifier_lookup(server_client: GovernanceProgramClient) -> None:
    domains = server_client.domains
    guid = domains.create_governance_domain(USER_ID, _domain(2, "Privacy"))
    domains.create_governance_domain(USER_ID, _domain(0, "All"))

    privacy = domains.get_governance_domain_by_identifier(USER_ID, 2)
    every_domain = domains.get_governance_domain_by_identifier(USER_ID, 0)

    assert privacy.element_header.guid == guid
    assert privacy.properties.qualified_name == "GovernanceDomain:Privacy"
    assert every_domain.properties.display_name == "All"
    assert domains.get_governance_domain_by_identifier(USER_ID, 99) is None
