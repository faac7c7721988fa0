"""
Sidebar fragment renderer for the package documentation pages.
Produces the fixed markup with the RenderConfig values filled in.
"""
from __future__ import annotations
from typing import List

from doc_sidebar.utils.typing import RenderConfig

SOURCE_URL = "https://github.com/pdsdev/cdf"

DOWNLOAD_URL = "http://{host}/{path}/{package}-{version}-dist.zip"

# str.format placeholders: base, download_url, source_url.
SIDEBAR_TEMPLATE = (
    '<div class="span3 sidebar">',
    '   <div class="well" style="padding: 8px 0px; position: fixed;"">',
    '      <ul class="nav nav-list">',
    '         <li class="nav-header">Contents</li>',
    '         <li><a href="#About">About {base}</a></li>',
    '         <li><a href="#Requirements">System Requirements</a></li>',
    '         <li><a href="#Unpacking">Unpacking the Package</a></li>',
    '         <li><a href="#Using">Using the Tool</a></li>',
    '         <li><a href="#Velocity">Using with Apache Velocity</a></li>',
    '      </ul>',
    '      <ul class="nav nav-list">',
    '         <li class="nav-header">Quick Links</li>',
    '         <li><a href="api/index.html">Class API</a></li>',
    '         <li><a href="example/index.html">Examples</a></li>',
    '         <li><a href="{download_url}">Download</a></li>',
    '         <li><a href="{source_url}">Source Code</a></li>',
    '      </ul>',
    '   </div><!-- well -->',
    '   &nbsp;',
    '</div><!-- sidebar -->',
)

def download_url(config: RenderConfig) -> str:
    return DOWNLOAD_URL.format(
        host=config.host,
        path=config.path,
        package=config.package,
        version=config.version,
    )

def render(config: RenderConfig) -> List[str]:
    """Return the sidebar markup lines in document order, without newlines."""
    values = {
        "base": config.base,
        "download_url": download_url(config),
        "source_url": SOURCE_URL,
    }
    # format() does not re-parse substituted values; braces in them are kept.
    return [line.format(**values) for line in SIDEBAR_TEMPLATE]

def render_text(config: RenderConfig) -> str:
    return "".join(line + "\n" for line in render(config))
