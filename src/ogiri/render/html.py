"""
HTML Rendering.

Two outputs:
- `render_topic_html`: the result-area fragment for one topic (pure).
- `generate_html`: a standalone page with a topic navigation strip. The
  first topic is rendered server-side; the page script re-renders the
  result area from the embedded data when a navigation link is clicked.
"""

import json
import re
import webbrowser
from dataclasses import asdict
from html import escape
from pathlib import Path
from typing import List

from ..core.types import TopicMapping
from .view_model import TopicView, build_topic_view

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="ja">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>お題 結果</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, "Hiragino Sans", "Meiryo", sans-serif;
            margin: 24px;
            color: #222;
        }
        #odai-nav a {
            margin: 0 5px;
            text-decoration: none;
            color: #2563eb;
        }
        #odai-nav a.active {
            font-weight: bold;
            text-decoration: underline;
        }
        .odai-title { font-size: 1.2em; font-weight: bold; }
        .answer-item { margin-bottom: 20px; }
        .answer-text { font-size: 1.1em; margin: 5px 0; }
        .respondent { font-size: 0.9em; color: #555; }
        .breakdown { font-size: 0.8em; color: #777; }
    </style>
</head>
<body>
    <div id="result-container">
        <nav id="odai-nav">__NAVIGATION__</nav>
        <div id="result-area">__RESULT_AREA__</div>
    </div>

    <script>
        const TOPICS = __TOPIC_DATA__;
        const nav = document.getElementById('odai-nav');
        const resultArea = document.getElementById('result-area');

        function escapeHtml(value) {
            return String(value)
                .replace(/&/g, '&amp;')
                .replace(/</g, '&lt;')
                .replace(/>/g, '&gt;')
                .replace(/"/g, '&quot;')
                .replace(/'/g, '&#x27;');
        }

        function renderTopic(topic) {
            let html = '';
            html += `<h3>お題 (番号: ${escapeHtml(topic.key)})</h3>`;
            html += `<p class="odai-title">${escapeHtml(topic.title)}</p>`;
            html += `<p>出題者: ${escapeHtml(topic.submitter)}</p>`;
            html += '<hr>';
            topic.answers.forEach(answer => {
                html += '<div class="answer-item">';
                html += `<strong>${answer.rank}位</strong> (${escapeHtml(answer.votes)}票)<br>`;
                html += `<p class="answer-text">${escapeHtml(answer.text)}</p>`;
                html += `<p class="respondent">回答者: ${escapeHtml(answer.respondent)}</p>`;
                if (answer.breakdown) {
                    html += `<p class="breakdown">投票内訳: ${escapeHtml(answer.breakdown)}</p>`;
                }
                html += '</div>';
            });
            resultArea.innerHTML = html;
        }

        function selectTopic(key) {
            const topic = TOPICS.find(t => t.key === key);
            if (!topic) return;
            renderTopic(topic);
            nav.querySelectorAll('a').forEach(a => {
                a.classList.toggle('active', a.dataset.key === key);
            });
        }

        nav.querySelectorAll('a').forEach(link => {
            link.addEventListener('click', event => {
                event.preventDefault();
                selectTopic(link.dataset.key);
            });
        });
    </script>
</body>
</html>
"""


_SLOT = re.compile(r"__(NAVIGATION|RESULT_AREA|TOPIC_DATA)__")


def render_topic_html(view: TopicView) -> str:
    """Render the result area for one topic."""
    parts: List[str] = [
        f"<h3>お題 (番号: {escape(view.key)})</h3>",
        f'<p class="odai-title">{escape(view.title)}</p>',
        f"<p>出題者: {escape(view.submitter)}</p>",
        "<hr>",
    ]
    for answer in view.answers:
        parts.append('<div class="answer-item">')
        parts.append(f"<strong>{answer.rank}位</strong> ({escape(answer.votes)}票)<br>")
        parts.append(f'<p class="answer-text">{escape(answer.text)}</p>')
        parts.append(f'<p class="respondent">回答者: {escape(answer.respondent)}</p>')
        if answer.breakdown:
            parts.append(f'<p class="breakdown">投票内訳: {escape(answer.breakdown)}</p>')
        parts.append("</div>")
    return "".join(parts)


def render_navigation_html(keys: List[str], active: str | None = None) -> str:
    """One `<a href="#">` per topic key, in the given order."""
    links = []
    for key in keys:
        css = ' class="active"' if key == active else ""
        links.append(f'<a href="#" data-key="{escape(key)}"{css}>{escape(key)}</a>')
    return "".join(links)


def _script_json(data) -> str:
    # "</" would close the surrounding <script> element
    return json.dumps(data, ensure_ascii=False).replace("</", "<\\/")


def generate_html(mapping: TopicMapping) -> str:
    """
    Generate a standalone results page for every topic in `mapping`.
    """
    views = [build_topic_view(key, topic) for key, topic in mapping.items()]
    keys = [v.key for v in views]
    first = views[0] if views else None

    slots = {
        "NAVIGATION": render_navigation_html(keys, first.key if first else None),
        "RESULT_AREA": render_topic_html(first) if first else "",
        "TOPIC_DATA": _script_json([asdict(v) for v in views]),
    }
    # Single pass, so placeholder-like text inside answers is left alone
    return _SLOT.sub(lambda m: slots[m.group(1)], HTML_TEMPLATE)


def write_html(mapping: TopicMapping, output_path: str = "results.html", open_browser: bool = False) -> str:
    """
    Write the results page to disk, optionally opening it in the browser.
    """
    out_file = Path(output_path)
    out_file.write_text(generate_html(mapping), encoding="utf-8")

    if open_browser:
        webbrowser.open(out_file.resolve().as_uri())

    return str(out_file)
