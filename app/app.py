"""
UI layer
Purpose: Streamlit-only glue for the practice console. Renders widgets/tabs,
collects user inputs, and delegates all work to the controller. Keeps UI
concerns (layout/state widgets) separate from selection and scoring logic so
that logic can be unit tested without Streamlit.
"""

import json

import streamlit as st

from interview_core.catalog import round_label
from interview_core.config import configure_logging, load_settings
from interview_core.controller import InterviewController
from interview_core.models import EXTERNAL_ROUND_IDS, Difficulty, LLMSettings, Round
from interview_core.persistence.interview_store import InMemoryInterviewStore
from interview_core.services.llm_openai import OpenAILLMClient
from interview_core.services.question_bank import QuestionBank
from interview_core.services.rubrics import RubricLibrary, extract_pdf_text

settings = load_settings()
configure_logging(settings.log_level)

# ---------------------------
# Page config
# ---------------------------
st.set_page_config(
    page_title="PM Mock Interview Practice",
    page_icon="🎯",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ---------------------------
# UI constants
# ---------------------------
ROUND_IDS = list(EXTERNAL_ROUND_IDS.keys())
DIFFICULTIES = [d.value for d in Difficulty]

# ---------------------------
# Session state init
# ---------------------------
st_session = st.session_state
st_session.setdefault("controller", None)
st_session.setdefault("api_key_set", False)
st_session.setdefault("user_id", "demo-user")
st_session.setdefault("interview", None)
st_session.setdefault("transcript", [])
st_session.setdefault("last_insights", None)


# ---------------------------
# Helpers
# ---------------------------
def build_controller(llm=None) -> InterviewController:
    """Load rubrics, parse the question bank and wire a fresh controller."""
    library = RubricLibrary.from_json(settings.rubrics_path)
    return InterviewController(
        QuestionBank.from_library(library),
        InMemoryInterviewStore(),
        llm=llm,
        library=library,
        generation_settings=LLMSettings(
            model=settings.generation_model, temperature=0.7, max_tokens=60
        ),
        interview_settings=LLMSettings(
            model=settings.model, temperature=0.7, max_tokens=300
        ),
        judge_settings=LLMSettings(
            model=settings.judge_model,
            temperature=0.2,
            max_tokens=1500,
            response_format={"type": "json_object"},
        ),
    )


def get_controller() -> InterviewController:
    if st_session.controller is None:
        st_session.controller = build_controller()
    return st_session.controller


def render_insights(insights) -> None:
    if insights is None:
        return
    st.metric("Headline score", f"{insights.score}%")
    if insights.summary:
        st.write(insights.summary)
    for category, value in (insights.scores or {}).items():
        st.progress(int(value) / 100, text=f"{category}: {int(value)}%")
    cols = st.columns(2)
    sections = [
        ("**Strengths**", insights.strengths),
        ("**Improvements**", insights.improvements),
    ]
    for (title, items), col in zip(sections, cols):
        with col:
            st.markdown(title)
            st.markdown("\n".join(f"- {it}" for it in items) if items else "—")


# ---------------------------
# SIDEBAR: settings & rubric upload
# ---------------------------
with st.sidebar:
    st.markdown("# Settings")

    st.markdown("## OPEN AI API Key (optional)")
    user_api_key = st.sidebar.text_input(
        "Enter your API key",
        type="password",
        value=settings.openai_api_key,
        help="Needed for transcript evaluation and for new questions once the bank runs out.",
    )
    if user_api_key and not st_session.api_key_set:
        try:
            llm = OpenAILLMClient(api_key=user_api_key)
            st_session.controller = build_controller(llm)
            st_session.api_key_set = True
        except RuntimeError as e:
            st.error(f"OpenAI client init failed: {e}")

    st_session.user_id = st.text_input("User id", value=st_session.user_id)
    round_id = st.selectbox(
        "Round",
        ROUND_IDS,
        format_func=lambda rid: round_label(Round.from_external(rid)),
    )
    difficulty = st.selectbox("Difficulty", DIFFICULTIES, index=1)
    st.divider()

    st.markdown("## Rubric PDF")
    uploaded_pdf = st.file_uploader("Replace this bucket's rubric", type=["pdf"])
    if uploaded_pdf and st.button("Load rubric"):
        count = len(
            get_controller().bank.load(
                Round.from_external(round_id),
                Difficulty.parse(difficulty),
                extract_pdf_text(uploaded_pdf),
            )
        )
        st.toast(f"Loaded {count} practice questions.")

controller = get_controller()

(tab_practice, tab_score, tab_readiness) = st.tabs(["Practice", "Score", "Readiness"])

# ---------------------------
# Practice
# ---------------------------
with tab_practice:
    if st.button("Start interview", type="primary"):
        try:
            st_session.interview = controller.start_interview(
                st_session.user_id, round_id, difficulty
            )
            st_session.transcript = [
                {"role": "assistant", "content": st_session.interview.question_text}
            ]
            st_session.last_insights = None
        except (RuntimeError, ValueError) as e:
            st.error(str(e))

    interview = st_session.interview
    if interview is not None:
        tier = interview.selection_tier.value if interview.selection_tier else "?"
        st.caption(f"Interview {interview.interview_id} · question source: {tier}")
        for m in st_session.transcript:
            with st.chat_message(m["role"]):
                st.write(m["content"])

        answer = st.chat_input("Your answer")
        if answer:
            st_session.transcript.append({"role": "user", "content": answer})
            try:
                if controller.is_ready():
                    with st.spinner("Interviewer is thinking…"):
                        follow_up = controller.reply(
                            interview.interview_id, st_session.transcript
                        )
                    st_session.transcript.append({"role": "assistant", "content": follow_up})
            except (RuntimeError, ValueError) as e:
                st.error(str(e))
            else:
                st.rerun()

        if st.button("Finish & evaluate"):
            try:
                with st.spinner("Evaluating…"):
                    st_session.last_insights = controller.complete_interview(
                        interview.interview_id, st_session.transcript
                    )
            except (RuntimeError, ValueError) as e:
                st.error(str(e))
        render_insights(st_session.last_insights)

# ---------------------------
# Score a judge reply by hand
# ---------------------------
with tab_score:
    st.markdown("Paste a judge JSON reply to score it against the current interview.")
    raw = st.text_area("Judge JSON", height=220, placeholder='{"score": 7.3, "scores": {...}}')
    if st.button("Score"):
        if st_session.interview is None:
            st.warning("Start an interview first.")
        else:
            try:
                payload = json.loads(raw or "{}")
            except json.JSONDecodeError as e:
                st.error(f"Invalid JSON: {e}")
            else:
                try:
                    render_insights(
                        controller.score_judgement(st_session.interview.interview_id, payload)
                    )
                except ValueError as e:
                    st.error(str(e))

# ---------------------------
# Readiness
# ---------------------------
with tab_readiness:
    report = controller.readiness(st_session.user_id)
    st.metric("Overall readiness", f"{report.overall}%", help=f"{report.sessions} sessions")
    for r in report.by_round:
        st.progress(
            r.score / 100 if r.count else 0.0,
            text=f"{round_label(r.round)}: {f'{r.score}%' if r.count else '—'}",
        )
    cols = st.columns(2)
    with cols[0]:
        st.markdown("**Strengths**")
        st.markdown(
            "\n".join(f"- {round_label(r.round)} ({r.score}%)" for r in report.strengths) or "—"
        )
    with cols[1]:
        st.markdown("**Focus areas**")
        st.markdown(
            "\n".join(f"- {round_label(r.round)} ({r.score}%)" for r in report.improvements)
            or "—"
        )
