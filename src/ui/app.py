import asyncio
import html
from datetime import datetime

import streamlit as st

from src import config
from src.agents.client import AgentServiceClient
from src.agents.invoker import AgentInvoker
from src.profiles.brand_voice_store import BrandVoiceStore
from src.render.markdown import to_html
from src.render.sections import (
    SECTION_BUILDERS,
    Badge,
    Section,
    content_header,
)
from src.ui.clipboard import Acknowledgement, copy_script_html
from src.ui.dashboard import dashboard_stats, greeting
from src.ui.supervisor import CrashSupervisor
from src.utils.logging import setup_logging
from src.workflow.context import AppContext
from src.workflow.forms import (
    CONTENT_TYPE_LABELS,
    FORMAT_OPTIONS,
    PLATFORM_OPTIONS,
    TIMEZONE_OPTIONS,
)
from src.workflow.workflows import build_controllers

logger = setup_logging(level=config.log_level())

# Avoid repeating this on every Streamlit rerun
if "logger_announced" not in st.session_state:
    logger.info("UI logger is configured (should appear in terminal).")
    st.session_state["logger_announced"] = True


# ----------------------------
# Async runner (Streamlit-safe for Python 3.11)
# ----------------------------
def run_async(coro):
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
    return loop.run_until_complete(coro)


# ----------------------------
# UI Setup
# ----------------------------
st.set_page_config(page_title="FounderPost: AI Content Studio", page_icon="⚡", layout="wide")

BADGE_CSS = """
<style>
.fp-badge { display:inline-block; padding:0.1rem 0.55rem; margin:0.1rem; border-radius:999px;
            font-size:0.75rem; font-weight:600; border:1px solid #e2e8f0; color:#334155; }
.fp-instagram { background:linear-gradient(90deg,#ec4899,#a855f7,#fb923c); color:#fff; border:0; }
.fp-linkedin { background:#0077b5; color:#fff; border:0; }
.fp-high { background:#fee2e2; color:#b91c1c; border-color:#fecaca; }
.fp-medium { background:#fef3c7; color:#b45309; border-color:#fde68a; }
.fp-low { background:#d1fae5; color:#047857; border-color:#a7f3d0; }
.fp-high_volume { background:#ede9fe; color:#6d28d9; border-color:#ddd6fe; }
.fp-niche { background:#d1fae5; color:#047857; border-color:#a7f3d0; }
.fp-trending { background:#fef3c7; color:#b45309; border-color:#fde68a; }
.fp-peak { background:#d1fae5; color:#047857; border:0; }
.fp-elevated { background:#dbeafe; color:#1d4ed8; border:0; }
</style>
"""

# Keep collaborators stable across reruns
if "context" not in st.session_state:
    store = BrandVoiceStore(config.DB_PATH)
    context = AppContext(brand_voice=store.load())
    invoker = AgentInvoker(AgentServiceClient(logger), logger)

    st.session_state["store"] = store
    st.session_state["context"] = context
    st.session_state["controllers"] = build_controllers(context, invoker, logger)
    st.session_state["supervisor"] = CrashSupervisor(logger)
    st.session_state["copy_ack"] = Acknowledgement(config.COPY_ACK_SECONDS)
    st.session_state["save_ack"] = Acknowledgement(config.SAVE_ACK_SECONDS)
    st.session_state["form_epoch"] = 0

context: AppContext = st.session_state["context"]
controllers = st.session_state["controllers"]
supervisor: CrashSupervisor = st.session_state["supervisor"]
copy_ack: Acknowledgement = st.session_state["copy_ack"]
save_ack: Acknowledgement = st.session_state["save_ack"]

VIEWS = {
    "dashboard": "Dashboard",
    "create": "Create Content",
    "hashtags": "Hashtags",
    "schedule": "Schedule",
    "analytics": "Analytics",
    "brand": "Brand Voice",
}

PLATFORM_LABELS = {"linkedin": "LinkedIn", "instagram": "Instagram", "both": "Both"}


# ----------------------------
# Callbacks (run before the script body)
# ----------------------------
def bump_form_epoch():
    # new widget keys so widgets pick up form values set outside the UI
    st.session_state["form_epoch"] += 1


def on_sample_toggle():
    context.set_sample_data(st.session_state["sample_toggle"])
    bump_form_epoch()


def go_to(view: str):
    st.session_state["view"] = view


def form_key(workflow: str, field: str) -> str:
    return f"{workflow}.{field}.{st.session_state['form_epoch']}"


# ----------------------------
# Display helpers
# ----------------------------
def badge_html(badge: Badge) -> str:
    return f'<span class="fp-badge fp-{badge.cls}">{html.escape(badge.label)}</span>'


def copy_text(text: str, label: str):
    copy_ack.copied(label)
    st.components.v1.html(copy_script_html(text), height=0)


def render_section(section: Section, workflow: str):
    st.markdown(f"##### {section.title}")

    if section.kind == "markdown":
        st.markdown(to_html(section.body), unsafe_allow_html=True)

    elif section.kind == "text":
        st.write(section.body)

    elif section.kind == "list":
        if section.key == "trending_tags":
            st.markdown(
                " ".join(badge_html(Badge(tag, "trending")) for tag in section.body),
                unsafe_allow_html=True,
            )
        else:
            for idx, item in enumerate(section.body):
                st.markdown(f"{idx + 1}. {item}")

    elif section.kind == "badges":
        st.markdown(
            " ".join(
                f'<span class="fp-badge fp-{row["cls"]}" title="Reach: {html.escape(row["reach"])} | '
                f'{html.escape(row["category"])}">{html.escape(row["tag"])}</span>'
                for row in section.body
            ),
            unsafe_allow_html=True,
        )
        if section.copy_text and st.button("Copy All", key=f"{workflow}.copy_all"):
            copy_text(section.copy_text, "All hashtags")

    elif section.kind == "cards":
        for idx, card in enumerate(section.body):
            with st.container(border=True):
                if section.key == "carousel_slides":
                    title, slide = card
                    st.caption(title)
                    st.write(slide)
                elif section.key == "hashtag_groups":
                    st.markdown(f"**{card['name']}**")
                    st.write(" ".join(card["tags"]))
                    if st.button("Copy", key=f"{workflow}.group.{idx}"):
                        copy_text(card["copy_text"], card["copy_label"])
                else:
                    badges = [badge_html(card["priority"])]
                    if card["expected_impact"]:
                        badges.insert(0, badge_html(Badge(card["expected_impact"], "low")))
                    st.markdown(
                        f'{badge_html(Badge(card["area"], "generic"))} ' + " ".join(badges),
                        unsafe_allow_html=True,
                    )
                    st.write(card["recommendation"])

    elif section.kind == "stats":
        cols = st.columns(len(section.body))
        for col, (label, value) in zip(cols, section.body):
            col.metric(label, str(value))

    elif section.kind == "metrics":
        cols = st.columns(max(len(section.body), 1))
        for col, (platform, rows) in zip(cols, section.body):
            with col:
                st.markdown(f"**{platform}**")
                for name, value in rows:
                    st.caption(name.capitalize())
                    st.write(value)

    elif section.kind == "table":
        rows = []
        for row in section.body:
            rows.append(
                "<tr>"
                + "".join(
                    f"<td>{badge_html(v) if isinstance(v, Badge) else html.escape(str(v))}</td>"
                    for v in row.values()
                )
                + "</tr>"
            )
        header = "".join(
            f"<th>{html.escape(k.replace('_', ' ').capitalize())}</th>" for k in section.body[0].keys()
        )
        st.markdown(
            f"<table><thead><tr>{header}</tr></thead><tbody>{''.join(rows)}</tbody></table>",
            unsafe_allow_html=True,
        )


def render_output(workflow: str, empty_text: str):
    controller = controllers[workflow]
    view = controller.view

    if view.status == "loading":
        st.info("Generating...")
        return

    if view.status != "success":
        with st.container(border=True):
            st.caption(empty_text)
        return

    if workflow == "content":
        badge, fmt = content_header(view.payload)
        header = badge_html(badge)
        if fmt:
            header += " " + badge_html(Badge(fmt, "generic"))
        st.markdown(header, unsafe_allow_html=True)

    for section in SECTION_BUILDERS[workflow](view.payload):
        render_section(section, workflow)

    if workflow == "content":
        cols = st.columns(3)
        if cols[0].button("Copy Content", key="content.copy"):
            copy_text(view.payload.post_content or "", "Content")
        cols[1].button("Generate Hashtags", key="content.to_hashtags", on_click=go_to, args=("hashtags",))
        cols[2].button("Schedule Post", key="content.to_schedule", on_click=go_to, args=("schedule",))

    if copy_ack.message:
        st.success(copy_ack.message)


def generate_button(workflow: str, label: str):
    controller = controllers[workflow]
    clicked = st.button(
        label,
        type="primary",
        key=f"{workflow}.generate",
        disabled=controller.view.status == "loading",
    )
    if clicked:
        with st.spinner("Generating..."):
            run_async(controller.generate())
        logger.info(f"UI received {workflow} status={controller.view.status}")

    if controller.error_message:
        st.error(controller.error_message)


# ----------------------------
# Pages
# ----------------------------
def render_dashboard():
    st.header(f"{greeting(datetime.now().hour)}, Founder")
    st.caption("Here is your content overview for today.")

    cols = st.columns(4)
    for col, card in zip(cols, dashboard_stats(context.sample_data)):
        col.metric(card.label, card.value, card.trend)

    st.subheader("Quick Actions")
    cols = st.columns(3)
    cols[0].button("Create Post", type="primary", on_click=go_to, args=("create",))
    cols[1].button("Plan Schedule", on_click=go_to, args=("schedule",))
    cols[2].button("View Analytics", on_click=go_to, args=("analytics",))


def render_create():
    controller = controllers["content"]
    form = controller.form
    st.header("Create Content")
    st.caption("Generate engaging posts for Instagram and LinkedIn.")

    left, right = st.columns(2)
    with left:
        topic = st.text_area(
            "Topic or Theme *",
            value=form.topic,
            placeholder="e.g., Lessons learned from our first 100 customers",
            key=form_key("content", "topic"),
        )
        platform = st.radio(
            "Platform",
            PLATFORM_OPTIONS,
            index=PLATFORM_OPTIONS.index(form.platform),
            format_func=PLATFORM_LABELS.get,
            horizontal=True,
            key=form_key("content", "platform"),
        )
        fmt = st.selectbox(
            "Content Format",
            FORMAT_OPTIONS,
            index=FORMAT_OPTIONS.index(form.format),
            format_func=lambda f: f.replace("_", " ").title(),
            key=form_key("content", "format"),
        )
        voice = st.text_area(
            "Brand Voice (optional)",
            value=form.voice,
            key=form_key("content", "voice"),
        )
        controller.update_form(topic=topic, platform=platform, format=fmt, voice=voice)
        generate_button("content", "Generate Content")

    with right:
        render_output("content", "Your generated content will appear here. Fill in the form and click Generate Content.")


def render_hashtags():
    controller = controllers["hashtags"]
    form = controller.form
    st.header("Hashtag Generator")
    st.caption("Get optimized hashtags for maximum reach.")

    left, right = st.columns(2)
    with left:
        content = st.text_area(
            "Post Content *",
            value=form.content,
            placeholder="Paste your post content here...",
            key=form_key("hashtags", "content"),
        )
        platform = st.radio(
            "Platform",
            ("linkedin", "instagram"),
            index=0 if form.platform == "linkedin" else 1,
            format_func=PLATFORM_LABELS.get,
            horizontal=True,
            key=form_key("hashtags", "platform"),
        )
        controller.update_form(content=content, platform=platform)
        generate_button("hashtags", "Generate Hashtags")

    with right:
        render_output("hashtags", "Hashtag suggestions will appear here.")


def render_schedule():
    controller = controllers["schedule"]
    form = controller.form
    st.header("Post Scheduler")
    st.caption("Plan your weekly posting calendar.")

    left, right = st.columns(2)
    with left:
        description = st.text_area(
            "Content Goals *",
            value=form.description,
            placeholder="Describe your business, audience and goals...",
            key=form_key("schedule", "description"),
        )
        platform = st.radio(
            "Platform",
            PLATFORM_OPTIONS,
            index=PLATFORM_OPTIONS.index(form.platform),
            format_func=PLATFORM_LABELS.get,
            horizontal=True,
            key=form_key("schedule", "platform"),
        )
        st.caption("Content Types")
        content_types = {
            k: st.checkbox(label, value=form.content_types.get(k, False), key=form_key("schedule", k))
            for k, label in CONTENT_TYPE_LABELS.items()
        }
        timezone = st.selectbox(
            "Time Zone",
            TIMEZONE_OPTIONS,
            index=TIMEZONE_OPTIONS.index(form.timezone),
            key=form_key("schedule", "timezone"),
        )
        controller.update_form(
            description=description, platform=platform, content_types=content_types, timezone=timezone
        )
        generate_button("schedule", "Generate Schedule")

    with right:
        render_output("schedule", "Your weekly schedule will appear here. Describe your content goals to get started.")


def render_analytics():
    controller = controllers["analytics"]
    form = controller.form
    st.header("Analytics Advisor")
    st.caption("Get AI-powered insights and recommendations for your content strategy.")

    metrics = st.text_area(
        "Your Metrics *",
        value=form.metrics,
        placeholder="e.g., Instagram: 2,500 followers, 4.5% engagement, avg 180 likes per post...",
        key=form_key("analytics", "metrics"),
    )
    platform = st.radio(
        "Platform",
        ("both", "linkedin", "instagram"),
        index=("both", "linkedin", "instagram").index(form.platform),
        format_func=PLATFORM_LABELS.get,
        horizontal=True,
        key=form_key("analytics", "platform"),
    )
    controller.update_form(metrics=metrics, platform=platform)
    generate_button("analytics", "Analyze Performance")

    render_output("analytics", "Analytics insights will appear here. Enter your metrics and click Analyze Performance.")


def render_brand_voice():
    st.header("Brand Voice")
    st.caption("Define your unique writing style so every generated post sounds authentically you.")

    voice = st.text_area(
        "Your Brand Voice Guide",
        value=context.brand_voice,
        height=240,
        placeholder="Tone, vocabulary, perspective, values, things to avoid...",
        key=form_key("brand", "voice"),
    )
    if st.button("Save Brand Voice", type="primary"):
        st.session_state["store"].save(voice)
        context.set_brand_voice(voice)
        bump_form_epoch()
        save_ack.show("Saved successfully")

    if save_ack.message:
        st.success(save_ack.message)


PAGES = {
    "dashboard": render_dashboard,
    "create": render_create,
    "hashtags": render_hashtags,
    "schedule": render_schedule,
    "analytics": render_analytics,
    "brand": render_brand_voice,
}


# ----------------------------
# Sidebar
# ----------------------------
def render_sidebar():
    st.sidebar.title("⚡ FounderPost")
    st.sidebar.caption("AI Content Studio")

    st.sidebar.radio(
        "Navigation",
        list(VIEWS.keys()),
        format_func=VIEWS.get,
        key="view",
        label_visibility="collapsed",
    )

    st.sidebar.toggle(
        "Sample Data",
        value=context.sample_data,
        key="sample_toggle",
        on_change=on_sample_toggle,
    )

    st.sidebar.divider()
    st.sidebar.caption("AI AGENTS")
    for status in context.agent_statuses():
        marker = "🟣" if status.active else "🟢"
        suffix = " · Active" if status.active else ""
        st.sidebar.markdown(f"{marker} {status.name}{suffix}")

    with st.sidebar.expander("Pro Tip", expanded=False):
        st.caption("Use the Brand Voice page to save your unique writing style for consistent content.")


def render_page():
    st.markdown(BADGE_CSS, unsafe_allow_html=True)
    render_sidebar()
    PAGES[st.session_state.get("view", "dashboard")]()


def render_recovery(error: str):
    st.error("Something went wrong")
    st.caption(error)
    if st.button("Try again"):
        supervisor.reset()
        st.rerun()


supervisor.run(render_page, render_recovery)
