"""Countdown page for short-link redirects.

The page redirects on its own through ``<meta http-equiv="refresh">`` so it
works without scripts; the inline script only updates the visible counter.
"""

import json
from html import escape

from biolink.models.shortlink import Shortlink


def render_redirect_page(link: Shortlink, countdown: int) -> str:
    countdown = max(countdown, 0)
    target = escape(link.target_url, quote=True)
    title = escape(link.title or link.slug)
    # json.dumps gives a valid JS string literal; "</" is split so it cannot close the script
    target_js = json.dumps(link.target_url).replace("</", "<\\/")
    return f"""<!DOCTYPE html>
<html lang="id">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <meta name="robots" content="noindex" />
  <meta http-equiv="refresh" content="{countdown};url={target}" />
  <title>Redirecting to {title}</title>
</head>
<body>
  <main>
    <h1>{title}</h1>
    <p>Redirecting in <span id="countdown">{countdown}</span> seconds&hellip;</p>
    <p><a id="redirect-now" href="{target}" rel="noopener noreferrer">Go now</a></p>
  </main>
  <script>
    (function () {{
      var remaining = {countdown};
      var counter = document.getElementById("countdown");
      var timer = setInterval(function () {{
        remaining -= 1;
        if (remaining <= 0) {{
          clearInterval(timer);
          window.location.href = {target_js};
          return;
        }}
        counter.textContent = remaining;
      }}, 1000);
    }})();
  </script>
</body>
</html>"""
