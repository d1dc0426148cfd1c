"""Page-behavior script for the blog template.

Each behavior module holds its browser snippet and the same rule in
Python; ``build_bundle`` joins the snippets into the script the server
ships at ``SiteConfig.script_path``::

    from termblog.script import build_bundle

    js = build_bundle()
"""

from termblog.script.bundle import BEHAVIORS, build_bundle, script_tag, write_bundle

__all__ = [
    "BEHAVIORS",
    "build_bundle",
    "script_tag",
    "write_bundle",
]
