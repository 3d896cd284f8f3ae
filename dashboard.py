"""Operator dashboard: single HTML page polling /state."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

dashboard_router = APIRouter()

DASHBOARD_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Ultra-AI Autopilot</title>
    <script src="https://cdn.jsdelivr.net/npm/chart.js@4.4.4/dist/chart.umd.min.js"></script>
    <style>
        :root {
            --color-bg: #f0f2f5;
            --color-card: #ffffff;
            --color-primary: #4f46e5;
            --color-success: #22c55e;
            --color-warning: #f59e0b;
            --color-danger: #ef4444;
            --color-text: #0f172a;
            --color-muted: #64748b;
            --radius: 16px;
        }
        * { box-sizing: border-box; }
        body { margin: 0; font-family: -apple-system, BlinkMacSystemFont, sans-serif; background: var(--color-bg); color: var(--color-text); }
        header { display: flex; align-items: center; justify-content: space-between; padding: 20px 32px; background: var(--color-card); border-bottom: 1px solid #e2e8f0; }
        header h1 { margin: 0; font-size: 20px; font-weight: 900; font-style: italic; letter-spacing: -0.5px; }
        main { display: grid; grid-template-columns: 2fr 1fr; gap: 24px; padding: 24px 32px; }
        .card { background: var(--color-card); border-radius: var(--radius); padding: 20px; box-shadow: 0 8px 24px rgba(15, 23, 42, 0.06); }
        .stats { display: grid; grid-template-columns: repeat(4, 1fr); gap: 12px; margin-bottom: 24px; }
        .stat .label { font-size: 11px; color: var(--color-muted); text-transform: uppercase; }
        .stat .value { font-size: 20px; font-weight: 800; }
        button { border: 0; border-radius: 12px; padding: 10px 18px; font-weight: 700; cursor: pointer; background: var(--color-primary); color: #fff; }
        button:disabled { opacity: 0.5; cursor: default; }
        button.toggle.on { background: var(--color-success); }
        input { flex: 1; padding: 10px 14px; border-radius: 12px; border: 1px solid #cbd5e1; font-size: 14px; }
        .row { display: flex; gap: 12px; align-items: center; }
        .thumb { width: 100%; aspect-ratio: 16 / 9; border-radius: 12px; background: #e2e8f0; object-fit: cover; margin-top: 16px; }
        .tags span { display: inline-block; margin: 4px 6px 0 0; padding: 2px 8px; border-radius: 8px; background: #eef2ff; color: var(--color-primary); font-size: 12px; }
        .log { list-style: none; margin: 0; padding: 0; font-family: ui-monospace, monospace; font-size: 12px; }
        .log li { padding: 6px 0; border-bottom: 1px solid #f1f5f9; }
        .log .time { color: var(--color-muted); margin-right: 8px; }
        .log .success { color: var(--color-success); }
        .log .error { color: var(--color-danger); }
        .log .warning { color: var(--color-warning); }
        .tasks li { display: flex; justify-content: space-between; padding: 4px 0; font-size: 13px; }
        nav { display: flex; gap: 8px; }
        nav button { background: transparent; color: var(--color-muted); }
        nav button.active { background: var(--color-primary); color: #fff; }
        .placeholder { max-width: 420px; margin: 10vh auto; text-align: center; }
        .placeholder h2 { font-weight: 900; font-style: italic; text-transform: uppercase; }
        .hidden { display: none; }
    </style>
</head>
<body>
<header>
    <h1>ULTRA-AI <span id="active-tab" style="color: var(--color-primary); text-transform: uppercase"></span></h1>
    <nav id="tabs">
        <button data-tab="dashboard" onclick="setTab(this.dataset.tab)">Dashboard</button>
        <button data-tab="content" onclick="setTab(this.dataset.tab)">Content Factory</button>
        <button data-tab="voice" onclick="setTab(this.dataset.tab)">Neural Voice</button>
        <button data-tab="stats" onclick="setTab(this.dataset.tab)">Analytics</button>
    </nav>
    <button id="autopilot" class="toggle" onclick="toggleAutopilot()">Auto-Pilot: OFF</button>
</header>
<main id="core">
    <section>
        <div class="stats" id="stats"></div>
        <div class="card">
            <div class="row">
                <input id="topic" placeholder="Topic">
                <button id="generate" onclick="generate()">Generate</button>
                <button id="voice" onclick="previewVoice()">Voice</button>
            </div>
            <h2 id="title"></h2>
            <p id="description"></p>
            <div class="tags" id="hashtags"></div>
            <img class="thumb" id="thumbnail" alt="">
        </div>
        <div class="card" style="margin-top: 24px"><canvas id="chart" height="90"></canvas></div>
    </section>
    <aside>
        <div class="card"><h3>Pipeline</h3><ul class="tasks log" id="tasks"></ul></div>
        <div class="card" style="margin-top: 24px"><h3>Activity</h3><ul class="log" id="logs"></ul></div>
    </aside>
</main>
<div class="card placeholder hidden" id="placeholder">
    <h2>Tab Initializing...</h2>
    <p>Module under high-load optimization. Check back in a few clock cycles.</p>
    <button onclick="setTab('dashboard')">Return to Core</button>
</div>
<script>
let state = null;
let chart = null;
let topicDirty = false;

function esc(v) {
    return String(v).replace(/[&<>"']/g, c => ({"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#39;"}[c]));
}

document.getElementById('topic').addEventListener('input', () => { topicDirty = true; });

async function api(method, path, body) {
    const resp = await fetch(path, {
        method,
        headers: {'Content-Type': 'application/json'},
        body: body ? JSON.stringify(body) : undefined,
    });
    return resp.json();
}

function render(s) {
    state = s;
    if (!topicDirty) document.getElementById('topic').value = s.topic;
    document.getElementById('generate').disabled = s.generating;
    document.getElementById('generate').textContent = s.generating ? 'Generating...' : 'Generate';
    document.getElementById('voice').disabled = !s.metadata || s.voice_playing;
    const ap = document.getElementById('autopilot');
    ap.textContent = 'Auto-Pilot: ' + (s.autopilot ? 'ON' : 'OFF');
    ap.classList.toggle('on', s.autopilot);

    document.getElementById('active-tab').textContent = s.active_tab;
    document.querySelectorAll('#tabs button').forEach(b =>
        b.classList.toggle('active', b.dataset.tab === s.active_tab));
    const onCore = s.active_tab === 'dashboard';
    document.getElementById('core').classList.toggle('hidden', !onCore);
    document.getElementById('placeholder').classList.toggle('hidden', onCore);

    const m = s.metadata;
    document.getElementById('title').textContent = m ? m.title : '';
    document.getElementById('description').textContent = m ? m.description : '';
    document.getElementById('hashtags').innerHTML = m ? m.hashtags.map(t => `<span>${esc(t)}</span>`).join('') : '';
    const thumb = document.getElementById('thumbnail');
    if (s.thumbnail_url) { thumb.src = s.thumbnail_url; } else { thumb.removeAttribute('src'); }

    document.getElementById('logs').innerHTML = s.logs.map(l =>
        `<li><span class="time">${l.time}</span><span class="${l.severity}">${esc(l.message)}</span></li>`).join('');
    document.getElementById('tasks').innerHTML = s.tasks.map(t =>
        `<li><span>${t.label}</span><span>${t.status}</span></li>`).join('');
    document.getElementById('stats').innerHTML = s.stats.headline.map(h =>
        `<div class="card stat"><div class="label">${h.label}</div><div class="value">${h.value}</div></div>`).join('');

    if (!chart && window.Chart) {
        chart = new Chart(document.getElementById('chart'), {
            type: 'line',
            data: {
                labels: s.stats.series.map(p => p.name),
                datasets: [
                    {label: 'Reach', data: s.stats.series.map(p => p.reach), borderColor: '#4f46e5', tension: 0.4},
                    {label: 'Conversions', data: s.stats.series.map(p => p.conv), borderColor: '#22c55e', tension: 0.4},
                ],
            },
        });
    }
}

async function refresh() { render(await api('GET', '/state')); }

async function generate() {
    topicDirty = false;
    await api('POST', '/generate', {topic: document.getElementById('topic').value});
    refresh();
}

async function previewVoice() { await api('POST', '/voice/preview'); refresh(); }

async function setTab(tab) { await api('PUT', '/tab', {tab}); refresh(); }

async function toggleAutopilot() {
    await api('POST', '/autopilot', {enabled: !(state && state.autopilot)});
    refresh();
}

refresh();
setInterval(refresh, 1000);
</script>
</body>
</html>
"""


@dashboard_router.get("/", response_class=HTMLResponse)
async def serve_dashboard():
    return DASHBOARD_HTML
