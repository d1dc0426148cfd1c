"""Code blocks: language classes for the highlighter, and copy buttons.

Each ``.code-block`` that has a ``.code-lang`` label and a ``code``
element gets ``language-<lang>`` on the code element, then Prism runs
if the page loaded it.  ``.code-copy`` buttons copy the block's code.
"""

SYNTAX_JS = """\
  /* syntax highlighting */
  document.querySelectorAll('.code-block').forEach(function(block) {
    var langElement = block.querySelector('.code-lang');
    var codeElement = block.querySelector('code');

    if (langElement && codeElement) {
      codeElement.classList.add('language-' + langElement.textContent.trim().toLowerCase());
    }
  });

  if (typeof Prism !== 'undefined') {
    Prism.highlightAll();
  }
"""

CODE_COPY_JS = """\
  /* code copy buttons */
  document.querySelectorAll('.code-copy').forEach(function(button) {
    button.addEventListener('click', function() {
      var block = button.closest('.code-block');
      var codeElement = block ? block.querySelector('code') : null;
      var code = codeElement ? codeElement.textContent : '';

      copyText(code).then(function() {
        button.textContent = cfg.copiedLabel;
        button.classList.add(cfg.copiedClass);
        setTimeout(function() {
          button.textContent = cfg.copyLabel;
          button.classList.remove(cfg.copiedClass);
        }, cfg.copyFeedbackMs);
      }, function() {
        button.textContent = cfg.failedLabel;
        setTimeout(function() {
          button.textContent = cfg.copyLabel;
        }, cfg.copyFeedbackMs);
      });
    });
  });
"""

# Shared by the code and link copy buttons.  Rejects when the
# clipboard API is missing so both paths reach their failure branch.
COPY_TEXT_JS = """\
  function copyText(text) {
    try {
      return navigator.clipboard.writeText(text);
    } catch (e) {
      return Promise.reject(e);
    }
  }
"""


def language_class(lang: str) -> str:
    """Class the highlighter keys on, from a ``.code-lang`` label."""
    return "language-" + lang.strip().lower()
