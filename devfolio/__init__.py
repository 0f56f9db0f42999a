"""devfolio -- developer portfolio builder.

Turns a portfolio record (profile, social links, projects, theme) into a
standalone HTML page, stores records as JSON documents, prefills projects
from GitHub, and exports the page as a zip archive.

Quick usage::

    from devfolio.render import generate_portfolio_html, SAMPLE_PORTFOLIO_DATA

    html = generate_portfolio_html(SAMPLE_PORTFOLIO_DATA)
"""

__version__ = "0.1.0"
