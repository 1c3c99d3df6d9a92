"""
Random User Sandbox page
========================

Single HTML page served by the FastAPI app. All state, filtering, sorting and
card rendering happen server-side; the script below only forwards UI events
and swaps the returned card HTML into the container.

The interface is intentionally minimal:
- Vanilla JavaScript
- Inline CSS
- No external frontend libraries
"""


def render_page(initial_count: int = 20) -> str:
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width,initial-scale=1" />
  <title>Random User Sandbox</title>
  <style>
    :root {{
      --accent: rgb(40,70,120);
      --bg: #ffffff;
      --fg: #111111;
      --muted: #666666;
      --border: #dddddd;
    }}
    body {{
      margin: 0;
      font-family: system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif;
      color: var(--fg);
      background: var(--bg);
    }}
    header {{
      background: var(--accent);
      color: white;
      padding: 14px 18px;
    }}
    main {{
      max-width: 1200px;
      margin: 18px auto;
      padding: 0 14px 30px 14px;
    }}
    .filters {{
      display: flex;
      flex-wrap: wrap;
      gap: 8px;
      align-items: center;
      margin-bottom: 16px;
    }}
    .filters input[type="number"] {{
      width: 80px;
      border: 1px solid var(--border);
      border-radius: 10px;
      padding: 8px;
      font-size: 14px;
    }}
    button {{
      border: 0;
      border-radius: 10px;
      padding: 8px 12px;
      font-weight: 700;
      cursor: pointer;
      background: var(--accent);
      color: white;
    }}
    #person-cards {{
      display: grid;
      grid-template-columns: repeat(auto-fill, minmax(240px, 1fr));
      gap: 14px;
    }}
    .person_card {{
      border-radius: 12px;
      padding: 14px;
      color: white;
      text-align: center;
    }}
    .person_card img {{
      border-radius: 50%;
      margin: 8px 0;
    }}
    .card_bottom {{
      border-top: 1px solid rgba(255,255,255,0.35);
      padding: 6px 0;
    }}
    .card_bottom p {{
      margin: 2px 0;
      word-break: break-word;
    }}
    .card_bottom p:first-child {{
      font-size: 12px;
      opacity: 0.85;
    }}
  </style>
</head>
<body>
  <header>
    <h1 style="margin:0; font-size:18px;">Random User Sandbox</h1>
    <p id="greeting" style="margin:6px 0 0 0; font-size:13px; opacity:0.9;">Welcome</p>
  </header>

  <main>
    <div class="filters">
      <label for="people-count">People:</label>
      <input id="people-count" type="number" min="0" value="{initial_count}" />

      <button id="filter-show-all">Show all</button>
      <button id="filter-show-male" data-gender="male">Male</button>
      <button id="filter-show-female" data-gender="female">Female</button>

      <button id="filter-sort-first-name" data-sort="first_name">Sort by first name</button>
      <button id="filter-sort-last-name" data-sort="last_name">Sort by last name</button>
      <button id="filter-sort-age" data-sort="age">Sort by age</button>
      <button id="filter-sort-city" data-sort="city">Sort by city</button>
    </div>

    <div id="person-cards"></div>
  </main>

<script>
const personContainer = document.getElementById("person-cards");
const countInput = document.getElementById("people-count");

// Only the answer to the most recent request is drawn.
let latestRequest = 0;

async function callApi(path, body) {{
  const seq = ++latestRequest;
  const response = await fetch(path, {{
    method: "POST",
    headers: {{"Content-Type": "application/json"}},
    body: body === undefined ? undefined : JSON.stringify(body)
  }});
  if (!response.ok) {{
    // keep the cards we already have
    return;
  }}
  const view = await response.json();
  if (seq !== latestRequest || view.superseded) {{
    return;
  }}
  personContainer.innerHTML = view.html;
  // filters and sorts drop a pending larger fetch; show what is really cached
  if (parseInt(countInput.value, 10) > view.total) {{
    countInput.value = view.total;
  }}
}}

async function setGreeting() {{
  const response = await fetch("/api/greeting");
  if (!response.ok) {{
    return;
  }}
  const data = await response.json();
  document.getElementById("greeting").innerText = data.greeting;
}}

function setupFilters() {{
  countInput.addEventListener("input", (e) => {{
    const count = parseInt(e.target.value, 10);
    if (Number.isNaN(count)) {{
      return;
    }}
    callApi("/api/people/count", {{count: count}});
  }});

  document.getElementById("filter-show-all").onclick = () => callApi("/api/people/show-all");

  for (const button of document.querySelectorAll("[data-gender]")) {{
    button.onclick = () => callApi("/api/people/filter", {{gender: button.dataset.gender}});
  }}

  for (const button of document.querySelectorAll("[data-sort]")) {{
    button.onclick = () => callApi("/api/people/sort/" + button.dataset.sort);
  }}
}}

setGreeting().finally(() => {{
  callApi("/api/session").finally(setupFilters);
}});
</script>
</body>
</html>
"""
