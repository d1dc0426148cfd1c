"""Share buttons: Twitter and LinkedIn intents, plus copy-link.

Intent URLs are the configured templates with ``{url}`` and ``{title}``
replaced by their ``encodeURIComponent`` forms.  The title is the
page's first ``h1``, falling back to ``document.title``.
"""

from urllib.parse import quote

from termblog.config import ScriptConfig

SHARE_JS = """\
  /* share buttons */
  document.querySelectorAll('.share-btn').forEach(function(btn) {
    btn.addEventListener('click', function() {
      var shareType = btn.dataset.share;
      var url = window.location.href;
      var heading = document.querySelector('h1');
      var title = heading && heading.textContent ? heading.textContent : document.title;

      if (shareType === 'copy') {
        var originalText = btn.textContent;
        copyText(url).then(function() {
          btn.textContent = cfg.copiedLabel;
          btn.classList.add(cfg.copiedClass);
          setTimeout(function() {
            btn.textContent = originalText;
            btn.classList.remove(cfg.copiedClass);
          }, cfg.copyFeedbackMs);
        }, function() {
          alert(cfg.linkCopyFailed);
        });
        return;
      }

      var template = cfg.shareUrls[shareType];
      if (template) {
        window.open(
          template
            .replace('{url}', encodeURIComponent(url))
            .replace('{title}', encodeURIComponent(title)),
          '_blank'
        );
      }
    });
  });
"""

# Characters encodeURIComponent leaves alone, beyond what quote() keeps.
_URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    """Percent-encode *value* the way the browser's ``encodeURIComponent`` does."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def share_url(service: str, url: str, title: str, config: ScriptConfig | None = None) -> str | None:
    """Intent URL opened for *service*, or None if it has no intent (e.g. ``copy``)."""
    templates = dict((config or ScriptConfig()).share_urls)
    template = templates.get(service)
    if template is None:
        return None
    # First occurrence only, like String.prototype.replace with a string pattern
    return template.replace("{url}", encode_uri_component(url), 1).replace(
        "{title}", encode_uri_component(title), 1
    )
