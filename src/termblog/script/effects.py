"""Hover and scroll polish: card shadows, title glitch, reading progress."""

import random

CARD_SHADOW_JS = """\
  /* article card shadows */
  document.querySelectorAll('.article-card').forEach(function(card, index) {
    var color = cfg.cardColors[index % cfg.cardColors.length];
    var offset = cfg.cardShadowOffset + 'px';

    card.addEventListener('mouseenter', function() {
      card.style.boxShadow = offset + ' ' + offset + ' 0 ' + color;
    });

    card.addEventListener('mouseleave', function() {
      card.style.boxShadow = '';
    });
  });
"""

GLITCH_JS = """\
  /* hero title glitch */
  var heroTitle = document.querySelector('.hero-title');

  if (heroTitle) {
    var glitchInterval = null;

    heroTitle.addEventListener('mouseenter', function() {
      var count = 0;
      clearInterval(glitchInterval);
      glitchInterval = setInterval(function() {
        if (count < cfg.glitchSteps) {
          var amp = cfg.glitchAmplitude;
          var x = Math.random() * amp * 2 - amp;
          var y = Math.random() * amp * 2 - amp;
          heroTitle.style.transform = 'translate(' + x + 'px, ' + y + 'px)';
          count++;
        } else {
          heroTitle.style.transform = 'translate(0, 0)';
          clearInterval(glitchInterval);
        }
      }, cfg.glitchIntervalMs);
    });
  }
"""

READING_PROGRESS_JS = """\
  /* reading progress */
  if (document.querySelector('.article-detail')) {
    var progressBar = document.querySelector('.reading-progress');

    window.addEventListener('scroll', function() {
      if (!progressBar) return;
      var scrollable = document.documentElement.scrollHeight - window.innerHeight;
      var progress = scrollable > 0 ? (window.scrollY / scrollable) * 100 : 100;
      progressBar.style.width = Math.min(progress, 100) + '%';
    });
  }
"""

DEFAULT_CARD_COLORS = ("var(--accent)", "var(--accent-2)", "var(--accent-3)")


def card_shadow(index: int, colors: tuple[str, ...] = DEFAULT_CARD_COLORS, offset: int = 8) -> str:
    """Inline ``box-shadow`` for the card at *index* while hovered."""
    color = colors[index % len(colors)]
    return f"{offset}px {offset}px 0 {color}"


def glitch_frames(
    steps: int = 3,
    amplitude: float = 2.0,
    rng: random.Random | None = None,
) -> list[str]:
    """Transforms applied on successive ticks, ending with the reset."""
    rng = rng or random.Random()
    frames = []
    for _ in range(steps):
        x = rng.random() * amplitude * 2 - amplitude
        y = rng.random() * amplitude * 2 - amplitude
        frames.append(f"translate({x}px, {y}px)")
    frames.append("translate(0, 0)")
    return frames


def reading_progress(scroll_y: float, scroll_height: float, inner_height: float) -> float:
    """Progress bar width in percent, capped at 100.

    A page that cannot scroll counts as fully read.
    """
    scrollable = scroll_height - inner_height
    if scrollable <= 0:
        return 100.0
    return min(scroll_y / scrollable * 100, 100.0)
