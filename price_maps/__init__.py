"""Choropleth maps of UK house prices."""
