from __future__ import annotations
import argparse
import logging
from dataclasses import asdict

from flask import Flask, request, jsonify, Response
from versefinder import Engine
from versefinder import config as CFG
from versefinder.lazy import Lazy

log = logging.getLogger(__name__)

app = Flask(__name__)
# set by main() or by tests; otherwise the bundled corpus is built on first request
_engine: Engine | None = None
_bundled: Lazy[Engine] = Lazy(lambda: Engine())


def _get_engine() -> Engine:
    if _engine is not None:
        return _engine
    return _bundled.get()


# ---------- API ----------
@app.get("/api/ratio")
def api_ratio():
    q = request.args.get("q", "", type=str)
    threshold = request.args.get("threshold", CFG.DEFAULT_THRESHOLD, type=int)
    eng = _get_engine()
    ratio = eng.ratio_of_words_present(q, threshold)
    return jsonify({"q": q, "threshold": threshold, "ratio": ratio, "any": ratio > 0.0})


@app.get("/api/words")
def api_words():
    q = request.args.get("q", "", type=str)
    return jsonify(_get_engine().which_words_present(q))


@app.get("/api/locate")
def api_locate():
    q = request.args.get("q", "", type=str)
    hit = _get_engine().locate(q)
    if hit is None:
        return jsonify({"q": q, "error": "none of those words are in the bible"}), 404
    return jsonify(asdict(hit))


@app.get("/health")
def health():
    return jsonify({"ok": True, **_get_engine().stats()})


# ---------- UI ----------
@app.get("/")
def home():
    # One input, three fetches, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Verse Finder</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:820px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0 }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border); background:#0b1117; color:var(--ink); font-size:16px; }
.meta{ color:var(--muted); font-size:13px; margin-top:8px }
pre{ white-space:pre-wrap; border-top:1px solid var(--border); padding-top:12px }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Verse Finder</h1>
      <form onsubmit="go(); return false;">
        <input id="q" type="text" placeholder="Are these words in the bible?" autocomplete="off" autofocus />
      </form>
      <div id="stats" class="meta">Ready.</div>
      <pre id="out"></pre>
    </div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
async function go(){
  const q = encodeURIComponent($("#q").value);
  const r = await (await fetch(`/api/ratio?q=${q}`)).json();
  const w = await (await fetch(`/api/words?q=${q}`)).json();
  const l = await fetch(`/api/locate?q=${q}`);
  $("#stats").textContent = `ratio ${r.ratio.toFixed(3)} • words: ${w.join(" ") || "-"}`;
  if(!l.ok){ $("#out").textContent = "none of those words are in the bible"; return; }
  const hit = await l.json();
  const ref = hit.verse ? ` ${hit.verse[0]}:${hit.verse[1]}` : "";
  $("#out").textContent = `${hit.division_title} / ${hit.document_title}${ref}\n\n${hit.excerpt.trim()}`;
}
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of the verse finder")
    ap.add_argument("--corpus", default=None, help="Path to a corpus file (default: bundled)")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)

    global _engine
    # build before serving so a broken corpus stops the server here
    _engine = Engine(path=args.corpus).warm()
    log.info("Serving on %s:%d", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
