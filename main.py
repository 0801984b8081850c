"""Pigment drop mixer web API (Flask).

Mix drops of five base pigments (red, yellow, blue, white, black), name the
result, score it against a target color and search for drop recipes that
reproduce the target.

Endpoints
---------
/mix?red=1&blue=2&white=1&target=#4CAF50   mixed color, name, similarity
/recipes?target=teal&max_drops=8&top_k=3   best drop recipes, best first
/name?h=216&s=0.5&l=0.75                   name for an HSL triple
/palette, /palette/random                  the 64 target chips

Usage
-----
$ pip install -e .
$ python main.py                  # starts on http://127.0.0.1:5000

Settings can be overridden with DROP_MIXER_* environment variables, e.g.
DROP_MIXER_MAX_DROPS_LIMIT=12.
"""

from __future__ import annotations

from drop_mixer.app import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=False, threaded=True)
