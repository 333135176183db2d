import pytest

from backpack_engine.config import BackpackConfig, build_engine, build_resolver
from backpack_engine.renderer.glyph import TIBIA_TIER_TABLE
from tests.test_utils import RecordingNotifier, make_item


def test_defaults() -> None:
    config = BackpackConfig()
    assert config.max_slots == 32
    assert config.task_prefix == "backpack"
    assert config.category_separator == "-"
    assert config.glyph_table == "tibia"
    assert config.debug is False


def test_from_mapping_accepts_host_names() -> None:
    config = BackpackConfig.from_mapping(
        {"maxSlots": 8, "taskPrefix": "satchel", "debug": True, "theme": "dark"}
    )
    assert config == BackpackConfig(max_slots=8, task_prefix="satchel", debug=True)


def test_from_mapping_none_keeps_default() -> None:
    config = BackpackConfig.from_mapping({"max_slots": None, "category_separator": ":"})
    assert config.max_slots == 32
    assert config.category_separator == ":"


@pytest.mark.parametrize(
    "options",
    [
        {"maxSlots": 0},
        {"maxSlots": "many"},
        {"maxSlots": True},
        {"taskPrefix": ""},
        {"categorySeparator": ""},
        {"glyphTable": "pixel"},
    ],
)
def test_invalid_options(options: dict) -> None:
    with pytest.raises(ValueError):
        BackpackConfig.from_mapping(options)


def test_build_engine_applies_config() -> None:
    notifier = RecordingNotifier()
    engine = build_engine(
        BackpackConfig(max_slots=3, task_prefix="satchel", category_separator=":"),
        notifier,
    )
    stack = engine.add_item(make_item("health-potion:small"), 2)
    assert engine.max_slots == 3
    assert stack.category == "health-potion"
    assert notifier.task_names == ["satchel_item_added_health-potion:small"]


def test_build_resolver_applies_config() -> None:
    resolver = build_resolver(BackpackConfig(category_separator=":"))
    assert resolver.table is TIBIA_TIER_TABLE
    assert resolver.resolve_item("health-potion:small", 2) == "🧪🧪"
