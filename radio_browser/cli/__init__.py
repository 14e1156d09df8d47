"""Command-line tools for the radio-browser client.

- ``python -m radio_browser.cli.search``: look up stations by tag.
"""
