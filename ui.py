import html
import json

import streamlit as st
import streamlit.components.v1 as components


def setup_style():
    st.markdown("""
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Manrope:wght@400;600;700;800&display=swap');

        :root {
            --card-bg: rgba(255, 255, 255, 0.04);
            --card-border: rgba(255, 255, 255, 0.12);
            --text-main: #f4f6fb;
            --text-soft: rgba(236, 240, 250, 0.70);
            --accent: #7c9cff;
            --ok: #4cd4a0;
            --err: #ff7b7b;
        }

        html, body, .stApp {
            font-family: 'Manrope', sans-serif;
            color: var(--text-main);
            background: linear-gradient(180deg, #0b0f1c 0%, #101628 100%);
        }

        .uf-brand {
            display: flex;
            align-items: center;
            gap: 0.6rem;
            font-weight: 800;
            letter-spacing: 0.08em;
        }
        .uf-brand-logo {
            width: 2rem;
            height: 2rem;
            border-radius: 0.6rem;
            display: grid;
            place-items: center;
            background: var(--accent);
            color: #0b0f1c;
        }

        .uf-post {
            background: var(--card-bg);
            border: 1px solid var(--card-border);
            border-radius: 16px;
            padding: 1rem 1.2rem;
            margin-bottom: 0.8rem;
        }
        .uf-post h4 { margin: 0 0 0.3rem 0; }
        .uf-post-field {
            font-size: 0.78rem;
            color: var(--accent);
            text-transform: uppercase;
            letter-spacing: 0.06em;
        }
        .uf-post-summary { color: var(--text-soft); }
        .uf-post-meta {
            display: flex;
            gap: 1.2rem;
            font-size: 0.85rem;
            color: var(--text-soft);
        }

        .uf-flash {
            border-radius: 12px;
            padding: 0.7rem 1rem;
            margin-bottom: 1rem;
            border: 1px solid var(--card-border);
        }
        .uf-flash-success { border-color: var(--ok); color: var(--ok); }
        .uf-flash-error { border-color: var(--err); color: var(--err); }

        .uf-placeholder {
            min-height: 40vh;
            display: grid;
            place-items: center;
            color: var(--text-soft);
        }
    </style>
    """, unsafe_allow_html=True)


def render_brand():
    st.markdown(
        '<div class="uf-brand"><div class="uf-brand-logo">U</div><span>UNIFACE</span></div>',
        unsafe_allow_html=True,
    )


def render_flash(message):
    """Render a FormMessage (or nothing when it is None)."""
    if message is None:
        return
    kind = "uf-flash-success" if message.kind == "success" else "uf-flash-error"
    st.markdown(
        f'<div class="uf-flash {kind}">{html.escape(message.text)}</div>',
        unsafe_allow_html=True,
    )


def render_post_card(post):
    st.markdown(
        f"""
        <article class="uf-post">
          <span class="uf-post-field">{html.escape(post.field)}</span>
          <h4>{html.escape(post.title)}</h4>
          <p class="uf-post-summary">{html.escape(post.summary)}</p>
          <div class="uf-post-meta">
            <span>▲ {post.votes} votes</span>
            <span>💬 {post.replies} replies</span>
            <span>Sign up to read full thread and reply.</span>
          </div>
        </article>
        """,
        unsafe_allow_html=True,
    )


def show_loading_placeholder(message="Loading..."):
    st.markdown(
        f'<div class="uf-placeholder">{html.escape(message)}</div>',
        unsafe_allow_html=True,
    )


def redirect_browser(url):
    """Send the top-level window to an external URL (OAuth consent screen)."""
    components.html(
        f"""
        <script>
            window.parent.location.href = {json.dumps(url)};
        </script>
        """,
        height=0,
    )
