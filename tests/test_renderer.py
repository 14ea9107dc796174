import pytest

from price_maps import map_config
from price_maps.renderer import HoverState, RegionRenderer, Tooltip


@pytest.fixture
def renderer(features, england_model):
    index = {"A": 300000.0, "C": 600000.0}
    return RegionRenderer(features, index, england_model)


def test_one_handle_per_feature(renderer, features):
    assert [h.name for h in renderer.handles] == [f.name for f in features]
    assert len(renderer) == 3


def test_priced_regions_are_filled_from_the_color_model(renderer, england_model):
    a = renderer.handle_for("A")
    assert a.price == 300000.0
    assert a.fill == england_model.color_for(300000)
    assert a.bucket == 3


def test_missing_price_gets_no_data_fill(renderer):
    b = renderer.handle_for("B")
    assert not b.has_data
    assert b.price is None
    assert b.bucket is None
    assert b.fill == map_config.NO_DATA_COLOR


def test_custom_no_data_color(features, england_model):
    renderer = RegionRenderer(features, {}, england_model, no_data_color="#eeeeee")
    assert {h.fill for h in renderer.handles} == {"#eeeeee"}


def test_set_all_with_override(renderer):
    assert renderer.set_all("normal") == ("normal", "normal", "normal")
    assert renderer.set_all("dimmed", override=("B", "active")) == ("dimmed", "active", "dimmed")


def test_set_all_rejects_unknown_state(renderer):
    with pytest.raises(ValueError):
        renderer.set_all("glowing")
    with pytest.raises(ValueError):
        renderer.set_all("dimmed", override=("A", "glowing"))


def test_pointer_enter_dims_others_and_shows_tooltip(renderer):
    state = renderer.pointer_enter("A", 100, 200)
    assert state.shape_states == ("active", "dimmed", "dimmed")
    assert state.active == "A"
    assert state.tooltip == Tooltip(visible=True, html="A<br>£300,000", left=110, top=190)


def test_pointer_enter_without_price_shows_na(renderer):
    state = renderer.pointer_enter("B", 0, 0)
    assert state.tooltip.html == "B<br>N/A"


def test_pointer_move_tracks_pointer(renderer):
    entered = renderer.pointer_enter("A", 100, 200)
    moved = renderer.pointer_move(entered, 150, 120)
    assert moved.shape_states == entered.shape_states
    assert moved.tooltip.html == entered.tooltip.html
    assert (moved.tooltip.left, moved.tooltip.top) == (160, 110)


def test_pointer_move_while_idle_changes_nothing(renderer):
    idle = renderer.idle_state()
    assert renderer.pointer_move(idle, 5, 5) == idle


def test_pointer_leave_resets_everything(renderer):
    renderer.pointer_enter("A", 1, 1)
    state = renderer.pointer_leave()
    assert state.shape_states == ("normal", "normal", "normal")
    assert not state.tooltip.visible
    assert state.tooltip.bbox() is None
    assert state.active is None


def test_hover_does_not_mutate_handles(renderer):
    before = renderer.handles
    renderer.pointer_enter("C", 3, 4)
    assert renderer.handles == before


def test_hover_state_round_trips_through_dict(renderer):
    state = renderer.pointer_enter("C", 3, 4)
    assert HoverState.from_dict(state.to_dict()) == state


def test_tooltip_bbox(renderer):
    tooltip = renderer.pointer_enter("A", 20, 30).tooltip
    assert tooltip.bbox() == {"x0": 30, "x1": 30, "y0": 20, "y1": 20}


def test_opacities_follow_states(renderer):
    state = renderer.pointer_enter("B", 0, 0)
    opacities = renderer.opacities(state)
    assert opacities[1] == 1.0
    assert opacities[0] == opacities[2] < 1.0


def test_feature_collection_ids_match_locations(renderer):
    collection = renderer.feature_collection()
    assert [f["id"] for f in collection["features"]] == [0, 1, 2]
    assert collection["features"][1]["properties"] == {"name": "B"}


def test_colorscale_has_one_band_per_category(renderer, england_model):
    scale = renderer.colorscale()
    categories = renderer.fill_categories()
    assert categories[0] == map_config.NO_DATA_COLOR
    assert categories[1:] == england_model.range
    assert len(scale) == 2 * len(categories)
    assert scale[0][0] == 0 and scale[-1][0] == 1


def test_z_values_land_in_the_fill_band(renderer):
    n = len(renderer.fill_categories())
    scale = renderer.colorscale()
    for handle, z in zip(renderer.handles, renderer.z_values()):
        band = int(z)
        assert scale[2 * band][1] == handle.fill
        assert 0 < z < n


def test_trace(renderer):
    trace = renderer.to_trace()
    assert trace.type == "choropleth"
    assert list(trace.locations) == [0, 1, 2]
    assert trace.showscale is False
    assert trace.hoverinfo == "none"
    assert [row[1] for row in trace.customdata] == ["A<br>£300,000", "B<br>N/A", "C<br>£600,000"]
    assert list(trace.marker.opacity) == [1.0, 1.0, 1.0]
