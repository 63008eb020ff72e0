"""
Unit tests for the display model.
"""

import pytest
from domain.value_objects.categories import CompoundFilter, SpellAspect, SpellType
from infrastructure.row_store import InMemoryRowStore
from services.catalog_service import build_catalog
from services.display_service import (
    CLEAR_FILTER_ICON_ID,
    MISSING_ICON_ID,
    action_title,
    build_filter_panel,
    icon_strip,
    to_action_entry,
    to_action_list,
)


def _button(panel, group_name, key):
    group = next(group for group in panel.groups if group.name == group_name)
    return next(button for button in group.buttons if button.key == key)


class TestActionEntry:
    """Tests for list entries."""

    @pytest.mark.unit
    def test_title(self, catalog):
        """Test the list title format."""
        assert action_title(catalog.get(101)) == "#3: Water Cannon"

    @pytest.mark.unit
    def test_entry(self, catalog):
        """Test entry fields use member keys and labels."""
        entry = to_action_entry(catalog.get(105))

        assert entry.title == "#4: Drill Flame"
        assert entry.spell_type == "magic"
        assert entry.aspect == ["piercing", "fire"]
        assert entry.target == ["self_or_ally", "enemy"]
        assert entry.effects == ["slow"]
        assert entry.rank == "three"
        assert entry.rank_text == "★★★"
        assert entry.cast_time == "3s"
        assert entry.recast_time == "90s"

    @pytest.mark.unit
    def test_effects_in_column_order(self, catalog):
        """Test effects are listed in column order."""
        assert to_action_entry(catalog.get(104)).effects == ["paralysis", "sleep"]

    @pytest.mark.unit
    def test_icon_strip(self, catalog):
        """Test strip order: effects, aspects, target, type."""
        assert icon_strip(catalog.get(104)) == [72463, 72467, 15536, 15339, 15050]

    @pytest.mark.unit
    def test_missing_icon_fallback(self, sample_sheets):
        """Test a record without an icon gets the placeholder icon."""
        sample_sheets["Action"][101]["Icon"] = 0
        catalog = build_catalog(InMemoryRowStore(sample_sheets))

        entry = to_action_entry(catalog.get(101))

        assert entry.icon_id == MISSING_ICON_ID
        assert 0 not in entry.icon_strip

    @pytest.mark.unit
    def test_action_list_counts(self, catalog):
        """Test visible and total counts."""
        action_list = to_action_list(catalog.records[:2], total_count=len(catalog))

        assert action_list.visible_count == 2
        assert action_list.total_count == len(catalog)
        assert [entry.action_id for entry in action_list.actions] == [102, 103]


class TestFilterPanel:
    """Tests for build_filter_panel."""

    @pytest.mark.unit
    def test_groups(self, filter_engine):
        """Test the panel rows."""
        panel = build_filter_panel(filter_engine)

        assert [group.name for group in panel.groups] == ["general", "aspect", "effect", "cast", "recast"]
        assert panel.missing_icon_id == MISSING_ICON_ID
        assert panel.active_categories == []
        assert panel.visible_count == panel.total_count == 6

    @pytest.mark.unit
    def test_clear_button(self, filter_engine):
        """Test the general row ends with the clear button."""
        general = build_filter_panel(filter_engine).groups[0]

        assert general.buttons[-1].key == "clear"
        assert general.buttons[-1].icon_id == CLEAR_FILTER_ICON_ID

    @pytest.mark.unit
    def test_aspect_shortcuts(self, filter_engine):
        """Test the aspect row ends with the two compound shortcuts."""
        aspect = build_filter_panel(filter_engine).groups[1]
        compounds = [button for button in aspect.buttons if button.is_compound]

        assert [button.key for button in compounds] == ["piercing_fire", "blunt_earth"]
        assert all(button.category is None for button in compounds)

    @pytest.mark.unit
    def test_enabled_state(self, filter_engine):
        """Test button state follows the engine."""
        filter_engine.toggle(SpellType.MAGIC)
        filter_engine.toggle_compound(CompoundFilter.PIERCING_FIRE)

        panel = build_filter_panel(filter_engine)

        assert _button(panel, "general", "magic").enabled
        assert not _button(panel, "general", "physical").enabled
        assert _button(panel, "aspect", "piercing_fire").enabled
        assert _button(panel, "aspect", "fire").enabled
        assert [str(category) for category in panel.active_categories] == ["type", "aspect"]
        assert panel.visible_count == 2

    @pytest.mark.unit
    def test_compound_disabled_when_partial(self, filter_engine):
        """Test a compound button is only enabled when all its flags are."""
        filter_engine.toggle(SpellAspect.FIRE)

        panel = build_filter_panel(filter_engine)

        assert not _button(panel, "aspect", "piercing_fire").enabled

    @pytest.mark.unit
    def test_time_tooltips(self, filter_engine):
        """Test cast and recast tooltips."""
        panel = build_filter_panel(filter_engine)

        assert _button(panel, "cast", "s1_5").tooltip == "1.5s cast"
        assert _button(panel, "recast", "s120").tooltip == "120s cooldown"
