"""Unit tests for per-entity code schemes."""

import pytest

from app.config import Settings
from app.constants import ENTITY_CODE_MAX_LENGTH
from app.core.code_schemes import CodeScheme, EntityType, PrefixStyle, build_schemes
from app.models.customer import Customer
from app.models.project import Project
from app.models.vehicle import Vehicle
from app.models.vendor import Vendor


@pytest.fixture()
def schemes():
    return build_schemes(Settings())


class TestPrefixStyles:
    """Each entity derives its prefix differently."""

    def test_customer_abbreviates_name(self, schemes):
        scheme = schemes[EntityType.CUSTOMER]
        assert scheme.prefix_for("ABC Corporation Ltd") == "ABC"

    def test_customer_empty_name_falls_back(self, schemes):
        assert schemes[EntityType.CUSTOMER].prefix_for("") == "CUS"

    def test_vehicle_fallback(self, schemes):
        assert schemes[EntityType.VEHICLE].prefix_for(None) == "VEH"

    def test_vendor_prefix_is_fixed(self, schemes):
        scheme = schemes[EntityType.VENDOR]
        assert scheme.prefix_for("Sharma Transport") == "VEND"
        assert scheme.prefix_for("") == "VEND"

    def test_project_scoped_under_customer(self, schemes):
        scheme = schemes[EntityType.PROJECT]
        assert scheme.prefix_for("Warehouse Ops", parent_code="TES001") == "TES001-WAR"

    def test_project_uses_leading_letters_only(self, schemes):
        scheme = schemes[EntityType.PROJECT]
        assert scheme.prefix_for("3PL Hub", parent_code="TES001") == "TES001-PLH"
        assert scheme.prefix_for("Go", parent_code="TES001") == "TES001-GO"

    def test_project_without_letters_falls_back(self, schemes):
        scheme = schemes[EntityType.PROJECT]
        assert scheme.prefix_for("2024", parent_code="TES001") == "TES001-PRJ"

    def test_project_requires_parent(self, schemes):
        with pytest.raises(ValueError, match="parent code"):
            schemes[EntityType.PROJECT].prefix_for("Warehouse")


class TestOverrides:
    """Per-call overrides win over scheme defaults."""

    def test_max_length_override(self, schemes):
        assert schemes[EntityType.CUSTOMER].prefix_for("Mahindra", max_length=5) == "MAHIN"

    def test_fallback_override(self, schemes):
        assert schemes[EntityType.CUSTOMER].prefix_for("", fallback_prefix="NEW") == "NEW"

    def test_scheme_is_immutable(self):
        scheme = CodeScheme(EntityType.CUSTOMER, PrefixStyle.ABBREVIATION, "CUS")
        with pytest.raises(AttributeError):
            scheme.fallback_prefix = "XYZ"  # type: ignore[misc]


class TestBuildSchemes:
    """Schemes reflect configuration."""

    def test_all_entities_covered(self, schemes):
        assert set(schemes) == set(EntityType)

    def test_settings_applied(self):
        settings = Settings(code_max_length=4, code_pad_width=5, vendor_code_prefix="sup")
        schemes = build_schemes(settings)

        assert schemes[EntityType.CUSTOMER].max_length == 4
        assert schemes[EntityType.VEHICLE].pad_width == 5
        assert schemes[EntityType.VENDOR].prefix_for("anything") == "SUP"

    def test_code_limits_match_columns(self, schemes):
        for entity, model in (
            (EntityType.CUSTOMER, Customer),
            (EntityType.PROJECT, Project),
            (EntityType.VEHICLE, Vehicle),
            (EntityType.VENDOR, Vendor),
        ):
            assert schemes[entity].max_code_length == model.__table__.c.code.type.length

    def test_longest_project_code_fits(self, schemes):
        # Longest customer code, separator, widest prefix, ten-digit sequence
        longest = ENTITY_CODE_MAX_LENGTH + 1 + 10 + 10
        assert schemes[EntityType.PROJECT].max_code_length >= longest
