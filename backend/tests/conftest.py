"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svg2tsx.dependencies import get_options_store


CIRCLE_SVG = '<svg width="24" height="24"><circle cx="12" cy="12" r="10"/></svg>'

ALERT_CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"></circle>
  <line x1="12" y1="8" x2="12" y2="12"></line>
  <line x1="12" y1="16" x2="12.01" y2="16"></line>
</svg>'''

CLUTTERED_SVG = '''
<svg width="24" height="24" viewBox="0 0 24 24">
  <g id="layer1" data-name="test" transform="translate(0,0)">
    <rect fill="black" stroke="none" x="10" y="20" stroke-width="2"/>
  </g>
  <g></g>
</svg>
'''

NESTED_GROUPS_SVG = '<svg><g></g><rect x="10"/><g><g></g></g></svg>'

XLINK_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><use xlink:href="#icon"/></svg>'

TEXT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 20">
  <!-- label -->
  <text x="0" y="15">Hello</text>
</svg>'''


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def alert_circle_svg() -> str:
    return ALERT_CIRCLE_SVG


@pytest.fixture
def cluttered_svg() -> str:
    return CLUTTERED_SVG


@pytest.fixture(autouse=True)
def reset_options_store():
    """The API's options store is process-wide; start every test from defaults."""
    store = get_options_store()
    store.reset()
    yield
    store.reset()
