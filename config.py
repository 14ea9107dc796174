"""Configuration constants for the House Price Maps dashboard.

This module contains the display constants used by the dashboard layout:
map sizes, visibility styles, shape state styling and labels.
"""

APP_TITLE = "UK House Prices"

TOGGLE_BUTTON_LABEL = "Switch map: England regions / London boroughs"

# map canvas sizes in pixels (width, height)
MAP_SIZES = {
    'england': (1300, 1000),
    'london': (1700, 900),
}

VISIBLE_STYLE = {'display': 'block'}
HIDDEN_STYLE = {'display': 'none'}

# visual states of a region shape while hovering
SHAPE_STATES = ('normal', 'dimmed', 'active')

SHAPE_OPACITY = {
    'normal': 1.0,
    'dimmed': 0.35,
    'active': 1.0,
}

SHAPE_LINE_WIDTH = {
    'normal': 0.5,
    'dimmed': 0.5,
    'active': 2.0,
}

SHAPE_LINE_COLOR = 'rgb(255,255,255)'

ERROR_BANNER_STYLE = {
    'color': '#8a1c1c',
    'backgroundColor': '#fdecea',
    'border': '1px solid #f5c2c0',
    'padding': '12px 16px',
    'borderRadius': '4px',
    'margin': '12px 0',
}

LEGEND_FONT = {'size': 11, 'color': '#333333'}
