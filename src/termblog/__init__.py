"""termblog — static server and page-behavior script for a terminal-styled blog.

Serves a directory of pre-built pages, redirects ``/`` to the index
document, and ships the theme/search/share/archive behaviors as one
generated script.

Basic usage::

    from termblog import SiteConfig, create_app

    app = create_app(SiteConfig(public_dir="public"))
    app.run()

Or from the shell::

    termblog serve public --port 4001
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "ConfigurationError",
    "HTTPError",
    "MethodNotAllowed",
    "NotFound",
    "Redirect",
    "Request",
    "Response",
    "ScriptConfig",
    "SiteConfig",
    "TermblogError",
    "build_bundle",
    "create_app",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import termblog`` fast for the CLI.
    """
    if name == "App":
        from termblog.app import App

        return App

    if name in ("SiteConfig", "ScriptConfig"):
        from termblog import config as _config

        return getattr(_config, name)

    if name == "create_app":
        from termblog.site import create_app

        return create_app

    if name == "build_bundle":
        from termblog.script.bundle import build_bundle

        return build_bundle

    if name == "Request":
        from termblog.http.request import Request

        return Request

    if name in ("Response", "Redirect"):
        from termblog.http import response as _resp

        return getattr(_resp, name)

    if name in ("TermblogError", "ConfigurationError", "HTTPError", "MethodNotAllowed", "NotFound"):
        from termblog import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
