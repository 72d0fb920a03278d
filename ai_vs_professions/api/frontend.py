"""Single-page frontend served by the HTTP adapter.

The page is static HTML with a small inline script:
    - submit on button click or Enter (`POST /api/analyze`),
    - re-render on every `ViewState` frame from `GET /api/events`.

All user- and model-provided text is inserted with `textContent`, never as HTML.
"""

import json

TITLE = "AI vs Профессии"
SUBTITLE = "Напиши профессию, которую Искусственный Интеллект не сможет заменить... или сможет?"
PLACEHOLDER = "Введите профессию (например: Дизайнер)"
SUBMIT_LABEL = "Анализировать"

LABELS = {
    "verdictReplaceable": "ИИ может заменить!",
    "verdictSafe": "ИИ не справится!",
    "riskHigh": "Высокий риск",
    "riskLow": "Низкий риск",
    "imagePending": "Генерируем иллюстрацию...",
    "imageUnavailable": "Иллюстрация недоступна",
    "imageAlt": "AI generated illustration",
    "poweredBy": "Generated by Gemini",
}


PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="ru">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>__TITLE__</title>
<style>
  body { margin: 0; min-height: 100vh; background: #f8fafc; color: #0f172a;
         font-family: system-ui, sans-serif; display: flex; justify-content: center; }
  main { width: 100%; max-width: 42rem; padding: 3rem 1rem; }
  header { text-align: center; }
  h1 { font-size: 2.5rem; margin: 0 0 1rem; }
  .subtitle { color: #475569; font-size: 1.1rem; }
  .search { display: flex; gap: .5rem; background: #fff; padding: .5rem;
            border-radius: 1rem; box-shadow: 0 10px 25px rgba(15,23,42,.08); margin: 2rem 0; }
  .search input { flex: 1; border: none; font-size: 1.1rem; padding: .75rem 1rem; outline: none; }
  .search button { background: #4f46e5; color: #fff; border: none; border-radius: .75rem;
                   padding: .75rem 1.5rem; font-size: 1rem; cursor: pointer; }
  .search button:disabled { background: #cbd5e1; cursor: not-allowed; }
  .error { background: #fef2f2; color: #dc2626; padding: 1rem; border-radius: .75rem; }
  .card { background: #fff; border-radius: 1.5rem; overflow: hidden;
          box-shadow: 0 10px 25px rgba(15,23,42,.08); }
  .stripe { height: .5rem; }
  .stripe.high { background: #ef4444; } .stripe.low { background: #10b981; }
  .body { padding: 2rem; }
  .badge { display: inline-block; padding: .25rem .75rem; border-radius: 999px; font-size: .9rem; }
  .badge.high { background: #fee2e2; color: #b91c1c; }
  .badge.low { background: #d1fae5; color: #047857; }
  .figure { position: relative; aspect-ratio: 1 / 1; background: #f1f5f9; border-radius: 1rem;
            overflow: hidden; display: flex; align-items: center; justify-content: center; color: #94a3b8; }
  .figure img { width: 100%; height: 100%; object-fit: cover; }
  .overlay { position: absolute; left: 1rem; bottom: 1rem; background: rgba(0,0,0,.5); color: #fff;
             font-size: .75rem; padding: .35rem .75rem; border-radius: 999px; }
  [hidden] { display: none !important; }
</style>
</head>
<body>
<main>
  <header>
    <h1>__TITLE__</h1>
    <p class="subtitle">__SUBTITLE__</p>
  </header>

  <form class="search" id="search-form">
    <input id="profession" type="text" autocomplete="off" placeholder="__PLACEHOLDER__">
    <button id="submit" type="submit" disabled>__SUBMIT__</button>
  </form>

  <div class="error" id="error" hidden></div>

  <section class="card" id="result" hidden>
    <div class="stripe" id="stripe"></div>
    <div class="body">
      <h2 id="verdict"></h2>
      <span class="badge" id="badge"></span>
      <p id="explanation"></p>
      <div class="figure" id="figure">
        <img id="image" alt="" hidden>
        <span id="image-status"></span>
        <span class="overlay" id="overlay"></span>
      </div>
    </div>
  </section>
</main>
<script>
const LABELS = __LABELS__;
const form = document.getElementById("search-form");
const input = document.getElementById("profession");
const button = document.getElementById("submit");
let loading = false;

function syncButton() {
  button.disabled = loading || !input.value.trim();
  input.disabled = loading;
  button.textContent = loading ? "..." : "__SUBMIT__";
}

function render(state) {
  loading = state.loading;
  syncButton();

  const error = document.getElementById("error");
  error.hidden = !state.error;
  error.textContent = state.error || "";

  const panel = document.getElementById("result");
  panel.hidden = !state.result;
  if (!state.result) { return; }

  const risk = state.result.replaceable ? "high" : "low";
  document.getElementById("stripe").className = "stripe " + risk;
  document.getElementById("verdict").textContent =
    state.result.replaceable ? LABELS.verdictReplaceable : LABELS.verdictSafe;
  const badge = document.getElementById("badge");
  badge.className = "badge " + risk;
  badge.textContent = state.result.replaceable ? LABELS.riskHigh : LABELS.riskLow;
  document.getElementById("explanation").textContent = state.result.explanation;
  document.getElementById("overlay").textContent = LABELS.poweredBy;

  const image = document.getElementById("image");
  const status = document.getElementById("image-status");
  const outcome = state.image || { status: "pending" };
  if (outcome.status === "ready") {
    image.src = outcome.dataUri;
    image.alt = LABELS.imageAlt;
    image.hidden = false;
    status.textContent = "";
  } else {
    image.hidden = true;
    image.removeAttribute("src");
    status.textContent = outcome.status === "unavailable" ? LABELS.imageUnavailable : LABELS.imagePending;
  }
}

input.addEventListener("input", syncButton);

form.addEventListener("submit", async (event) => {
  event.preventDefault();
  const profession = input.value;
  if (loading || !profession.trim()) { return; }
  await fetch("/api/analyze", {
    method: "POST",
    headers: { "Content-Type": "application/json" },
    body: JSON.stringify({ profession }),
  });
});

const events = new EventSource("/api/events");
events.onmessage = (event) => render(JSON.parse(event.data));
</script>
</body>
</html>
"""


def _script_json(value) -> str:
    # Keeps `</script>` sequences out of the inline script.
    return json.dumps(value, ensure_ascii=False).replace("</", "<\\/")


def render_page() -> str:
    """Return the full HTML document for `GET /`."""
    return (
        PAGE_TEMPLATE
        .replace("__TITLE__", TITLE)
        .replace("__SUBTITLE__", SUBTITLE)
        .replace("__PLACEHOLDER__", PLACEHOLDER)
        .replace("__SUBMIT__", SUBMIT_LABEL)
        .replace("__LABELS__", _script_json(LABELS))
    )
