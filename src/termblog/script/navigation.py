"""Mobile navigation menu.

``#mobileMenuToggle`` toggles ``mobile-open`` on ``.nav``; a click
anywhere outside the nav, or on any ``.nav-link``, closes it.
"""

NAVIGATION_JS = """\
  /* mobile navigation */
  var menuToggle = document.getElementById('mobileMenuToggle');
  var nav = document.querySelector('.nav');

  if (menuToggle && nav) {
    menuToggle.addEventListener('click', function(e) {
      e.stopPropagation();
      nav.classList.toggle('mobile-open');
    });

    document.addEventListener('click', function(e) {
      if (!nav.contains(e.target) && nav.classList.contains('mobile-open')) {
        nav.classList.remove('mobile-open');
      }
    });

    document.querySelectorAll('.nav-link').forEach(function(link) {
      link.addEventListener('click', function() {
        nav.classList.remove('mobile-open');
      });
    });
  }
"""
