# file: ui.py
import os
import gradio as gr
import requests
import pandas as pd
from dotenv import load_dotenv
from typing import List, Optional
from urllib.parse import quote

load_dotenv()
DEFAULT_API_BASE = os.getenv("IRCVIEW_API_BASE", "http://127.0.0.1:8080/api/v1")

# --------------- Helpers ---------------

def _safe_api(method: str, url: str, **kwargs):
    try:
        resp = requests.request(method, url, timeout=30, **kwargs)
        resp.raise_for_status()
        return True, resp.json()
    except requests.exceptions.RequestException as e:
        return False, {"error": str(e)}

# --------------- API Wrappers ---------------

def ping_health(api_base: str):
    root = api_base.rsplit("/api/", 1)[0]
    ok, data = _safe_api("GET", f"{root}/health")
    if not ok:
        return f"❌ Backend health failed: `{data['error']}`"
    return f"✅ Backend OK · {data}"

def load_channels(api_base: str):
    ok, data = _safe_api("GET", f"{api_base}/channels")
    if not ok:
        return f"❌ Channel load failed: `{data['error']}`", gr.update(choices=[]), gr.update(choices=[])
    channels = data.get("channels", [])
    search_choices = [""] + channels
    return f"✅ {len(channels)} channels.", gr.update(choices=search_choices, value=""), gr.update(choices=channels, value=None)

# --- Search ---

def run_search(api_base: str, query: str, channel: Optional[str]):
    if not query:
        return "Enter a search query.", pd.DataFrame(columns=["channel", "log_date", "excerpt"])

    params = {"q": query}
    if channel:
        params["channel"] = channel
    ok, data = _safe_api("GET", f"{api_base}/search", params=params)
    if not ok:
        return f"❌ Search failed: `{data['error']}`", None

    records = data.get("records", [])
    if not records:
        summary = "No matching logs."
    else:
        summary = f"✅ {len(records)} logs in {', '.join(data.get('channels', []))}."
    if data.get("low_precision"):
        summary += "\n\n⚠️ Very short queries match loosely; results may be imprecise."

    df = pd.DataFrame(
        [{"channel": r.get("channel"), "log_date": r.get("log_date"), "excerpt": r.get("content")} for r in records],
        columns=["channel", "log_date", "excerpt"],
    )
    return summary, df

# --- Browse ---

def load_dates(api_base: str, channel: Optional[str]):
    if not channel:
        return gr.update(choices=[], value=None)
    ok, data = _safe_api("GET", f"{api_base}/channels/{quote(channel, safe='')}/dates")
    if not ok:
        return gr.update(choices=[], value=None)
    dates: List[str] = data.get("log_dates", [])
    return gr.update(choices=dates, value=dates[0] if dates else None)

def load_log(api_base: str, channel: Optional[str], log_date: Optional[str]):
    if not channel or not log_date:
        return "Select a channel and a date."
    ok, data = _safe_api("GET", f"{api_base}/logs/{quote(channel, safe='')}/{log_date}")
    if not ok:
        return f"❌ Log load failed: `{data['error']}`"
    return f"```\n{data.get('content', '')}\n```"

# --------------- Gradio App ---------------

with gr.Blocks(theme=gr.themes.Soft(), title="IRC Log Viewer") as demo:
    gr.Markdown("# 💬 IRC Log Viewer")
    gr.Markdown("Search archived channel logs (Japanese works without spaces) or browse them by day.")

    with gr.Row():
        api_base = gr.Textbox(value=DEFAULT_API_BASE, label="API Base URL", scale=3)
        health_btn = gr.Button("Ping Health", scale=1)
        channels_btn = gr.Button("Load Channels", scale=1)
        health_out = gr.Markdown()

    health_btn.click(fn=ping_health, inputs=[api_base], outputs=[health_out])

    with gr.Tabs():
        # -------- Search Tab --------
        with gr.Tab("Search"):
            with gr.Row():
                with gr.Column(scale=1):
                    query = gr.Textbox(label="Search", placeholder="e.g., deploy, 障害")
                    search_channel = gr.Dropdown(label="Channel (optional)", choices=[""], value="")
                    search_btn = gr.Button("Search", variant="primary")
                with gr.Column(scale=3):
                    search_status = gr.Markdown()
                    results_df = gr.Dataframe(headers=["channel", "log_date", "excerpt"], interactive=False, wrap=True)

            search_btn.click(
                fn=run_search,
                inputs=[api_base, query, search_channel],
                outputs=[search_status, results_df],
            )
            query.submit(
                fn=run_search,
                inputs=[api_base, query, search_channel],
                outputs=[search_status, results_df],
            )

        # -------- Browse Tab --------
        with gr.Tab("Browse"):
            with gr.Row():
                with gr.Column(scale=1):
                    browse_channel = gr.Dropdown(label="Channel", choices=[])
                    log_date = gr.Dropdown(label="Date", choices=[])
                    show_btn = gr.Button("Show Log", variant="primary")
                with gr.Column(scale=3):
                    log_md = gr.Markdown("The selected day's log will appear here.")

            browse_channel.change(fn=load_dates, inputs=[api_base, browse_channel], outputs=[log_date])
            show_btn.click(fn=load_log, inputs=[api_base, browse_channel, log_date], outputs=[log_md])

    channels_btn.click(fn=load_channels, inputs=[api_base], outputs=[health_out, search_channel, browse_channel])

demo.launch()
