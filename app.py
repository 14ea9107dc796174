import dash
from dash import html, dcc, Input, Output, State, Patch, no_update
from flask_caching import Cache
from flask_compress import Compress


from config import (
    APP_TITLE, TOGGLE_BUTTON_LABEL, ERROR_BANNER_STYLE
)

from helpers import toggle_map_visibility, visibility_style

from price_maps import map_config
from price_maps.exceptions import DataLoadError
from price_maps.figures import build_map_figure, build_map_view
from price_maps.loaders import load_map_data
from price_maps.renderer import HoverState
from price_maps.utils import logging_utils

logger = logging_utils.get_logger("app")

map_views = {}
load_error = None
try:
    map_data = load_map_data()
except DataLoadError as e:
    load_error = e
    logger.warning("Serving dashboard without maps: %s", e)
else:
    geometries = map_data.geometries
    for key, cfg in map_config.MAPS.items():
        map_views[key] = build_map_view(cfg, map_data.price_records, geometries[key])


app = dash.Dash(
    __name__, meta_tags=[{"name": "viewport", "content": "width=device-width"}],
)
app.title = APP_TITLE
server = app.server
Compress(app.server)

cache = Cache(app.server, config={
    'CACHE_TYPE': 'SimpleCache',
    'CACHE_DEFAULT_TIMEOUT': 3600,
    'CACHE_THRESHOLD': 1000
})


@cache.memoize(timeout=3600)
def base_figure(map_key):
    """Idle figure for a map, serialised for the layout.

    Args:
        map_key (str): 'england' or 'london'.

    Returns:
        dict: The Plotly figure as a dict.
    """
    return build_map_figure(map_views[map_key]).to_dict()


def tooltip_children(tooltip):
    """Split the tooltip markup into Dash components (name, line break, price)."""
    if not tooltip.visible:
        return no_update
    name, _, price = tooltip.html.partition("<br>")
    return [html.B(name), html.Br(), price]


def map_section(cfg, hidden):
    return html.Div(
        [
            dcc.Graph(
                id=f"{cfg.key}-map",
                figure=base_figure(cfg.key),
                clear_on_unhover=True,
                config={"displayModeBar": False},
            ),
            dcc.Tooltip(id=f"{cfg.key}-tooltip", direction="right"),
            dcc.Store(id=f"{cfg.key}-hover-store"),
        ],
        id=f"{cfg.key}-container",
        className="pretty_container",
        style=visibility_style(hidden),
    )


def error_banner(error):
    return html.Div(
        [
            html.H5("House price data could not be loaded", style={"margin-top": "0px"}),
            html.P(error.message),
        ],
        id="load-error",
        role="alert",
        style=ERROR_BANNER_STYLE,
    )


header = html.Div(
    [html.H3(APP_TITLE, style={"margin-bottom": "0px"})],
    id="header",
    style={"margin-bottom": "25px"},
)

if load_error is not None:
    app.layout = html.Div([header, error_banner(load_error)], id="mainContainer")
else:
    app.layout = html.Div(
        [
            header,
            html.Button(TOGGLE_BUTTON_LABEL, id="toggle-button", n_clicks=0),
            dcc.Store(id="england-hidden", data=False),
            # the first map shows, the rest start hidden
        ] + [
            map_section(cfg, hidden=i > 0)
            for i, cfg in enumerate(map_config.MAPS.values())
        ],
        id="mainContainer",
        style={"display": "flex", "flex-direction": "column"},
    )


def update_hover(map_key, hover_data, current_state):
    """Dim every region except the hovered one and place the tooltip.

    An empty hover event means the pointer left the map. A hover on the
    region already active only moves the tooltip.

    Args:
        map_key (str): 'england' or 'london'.
        hover_data (dict | None): Hover event from the map, None on unhover.
        current_state (dict | None): HoverState from the previous event.

    Returns:
        tuple: Figure patch, tooltip show flag, bbox, children and the new state.
    """
    renderer = map_views[map_key].renderer

    if not hover_data or not hover_data.get("points"):
        state = renderer.pointer_leave()
    else:
        point = hover_data["points"][0]
        name = point["customdata"][0]
        bbox = point.get("bbox") or {}
        x, y = bbox.get("x0", 0), bbox.get("y0", 0)
        previous = HoverState.from_dict(current_state) if current_state else None
        if previous is not None and previous.active == name:
            state = renderer.pointer_move(previous, x, y)
        else:
            state = renderer.pointer_enter(name, x, y)

    patch = Patch()
    patch["data"][0]["marker"]["opacity"] = renderer.opacities(state)
    patch["data"][0]["marker"]["line"]["width"] = renderer.line_widths(state)

    return (
        patch,
        state.tooltip.visible,
        state.tooltip.bbox() or no_update,
        tooltip_children(state.tooltip),
        state.to_dict(),
    )


def toggle_maps(n_clicks, england_hidden):
    """Show exactly one of the two maps."""
    england_hidden, london_hidden = toggle_map_visibility(bool(england_hidden))
    return england_hidden, visibility_style(england_hidden), visibility_style(london_hidden)


def register_hover_callbacks(map_key):
    """Wire dimming and tooltip updates for one map."""

    @app.callback(
        [Output(f"{map_key}-map", "figure"),
         Output(f"{map_key}-tooltip", "show"),
         Output(f"{map_key}-tooltip", "bbox"),
         Output(f"{map_key}-tooltip", "children"),
         Output(f"{map_key}-hover-store", "data")],
        [Input(f"{map_key}-map", "hoverData")],
        [State(f"{map_key}-hover-store", "data")],
        prevent_initial_call=True,
    )
    def on_hover(hover_data, current_state):
        return update_hover(map_key, hover_data, current_state)


if load_error is None:
    app.callback(
        [Output("england-hidden", "data"),
         Output("england-container", "style"),
         Output("london-container", "style")],
        [Input("toggle-button", "n_clicks")],
        [State("england-hidden", "data")],
        prevent_initial_call=True,
    )(toggle_maps)

    for key in map_config.MAPS:
        register_hover_callbacks(key)


if __name__ == '__main__':
    print("\n Starting dashboard server...")
    app.run(port=8097)
