"""Terminal typing effect for the hero ``.terminal-body``.

The container is cleared, then each scripted line is appended on its
own timer.  Lines starting with ``$`` render as a prompt plus command,
with a blinking cursor span when the text contains ``_``.  Only the
relative order of the delays matters; the values are presentation
polish.
"""

from collections.abc import Iterable
from dataclasses import dataclass

TERMINAL_JS = """\
  /* terminal typing */
  var terminalBody = document.querySelector('.terminal-body');

  if (terminalBody) {
    terminalBody.innerHTML = '';

    cfg.terminalLines.forEach(function(line) {
      setTimeout(function() {
        var lineDiv = document.createElement('div');
        lineDiv.className = 'terminal-line';

        if (line.text.charAt(0) === '$') {
          var prompt = document.createElement('span');
          prompt.className = 'prompt';
          prompt.textContent = '$';
          lineDiv.appendChild(prompt);

          var command = document.createElement('span');
          command.textContent = line.text.substring(1);
          lineDiv.appendChild(command);

          if (line.text.indexOf('_') !== -1) {
            var cursor = document.createElement('span');
            cursor.className = 'cursor';
            cursor.textContent = '_';
            lineDiv.appendChild(cursor);
          }
        } else {
          lineDiv.textContent = line.text;
        }

        terminalBody.appendChild(lineDiv);
      }, line.delay);
    });
  }
"""


@dataclass(frozen=True, slots=True)
class TerminalLine:
    text: str
    delay: int


@dataclass(frozen=True, slots=True)
class Span:
    """One text node of a rendered line; ``css_class`` None for plain spans."""

    text: str
    css_class: str | None = None


def render_line(text: str) -> tuple[Span, ...]:
    """Children of the ``div.terminal-line`` built for *text*.

    Plain lines are a single unclassed text node.
    """
    if not text.startswith("$"):
        return (Span(text),)
    parts = [Span("$", "prompt"), Span(text[1:])]
    if "_" in text:
        parts.append(Span("_", "cursor"))
    return tuple(parts)


def schedule(lines: Iterable[tuple[str, int]]) -> list[TerminalLine]:
    """Lines in the order their timers fire (stable for equal delays)."""
    ordered = [TerminalLine(text, delay) for text, delay in lines]
    return sorted(ordered, key=lambda line: line.delay)
