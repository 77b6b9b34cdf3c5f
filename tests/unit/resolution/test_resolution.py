# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for property and tenant resolution."""

from locadoc.core.primitives import TenantMatchPolicyEnum
from locadoc.records import ClientRecord, LeaseRecord
from locadoc.resolution import resolve_property, resolve_tenant
from tests.conftest import create_apartment


class TestResolveProperty:
    def test_match_by_id(self, properties):
        assert resolve_property("42", properties).title == "Apartamento Jardins"

    def test_match_by_title_ignores_case_and_whitespace(self, properties):
        match = resolve_property("  apartamento JARDINS ", properties)
        assert match is not None
        assert match.id == "42"

    def test_first_match_wins(self):
        first = create_apartment(id="1", title="Loft")
        second = create_apartment(id="2", title="loft")
        assert resolve_property("LOFT", [first, second]) is first

    def test_no_match(self, properties):
        assert resolve_property("Casa na Praia", properties) is None

    def test_integer_reference_matches_integer_id(self):
        lease = LeaseRecord(property_reference=42)
        match = resolve_property(lease.property_reference, [create_apartment(id=42)])
        assert match is not None
        assert match.id == "42"

    def test_blank_reference(self, properties):
        assert resolve_property("   ", properties) is None
        assert resolve_property(None, properties) is None


class TestResolveTenant:
    def test_most_recent_by_id_is_default(self, apartment, clients):
        tenant = resolve_tenant(apartment, clients)
        assert tenant.id == 7
        assert tenant.name == "Maria Souza"

    def test_first_match_policy(self, apartment, clients):
        tenant = resolve_tenant(apartment, clients, policy=TenantMatchPolicyEnum.FIRST_MATCH)
        assert tenant.id == 3

    def test_unresolved_property_matches_raw_references(self, clients):
        tenant = resolve_tenant(None, clients, references=("99", "Apartamento Jardins"))
        assert tenant.id == 7

    def test_integer_property_interest(self, apartment):
        tenant = resolve_tenant(apartment, [ClientRecord(id=9, name="Rui", property_interest=42)])
        assert tenant.name == "Rui"

    def test_no_match(self, apartment):
        other = [ClientRecord(id=1, name="Lead", property_interest="Outro imóvel")]
        assert resolve_tenant(apartment, other) is None

    def test_nothing_to_match(self, clients):
        assert resolve_tenant(None, clients) is None
