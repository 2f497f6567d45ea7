"""
Healthcare Staffing Intelligence – Streamlit dashboard.
No scoring logic in layout; gathering and aggregation live in the agents/services layers.
"""

import asyncio
import csv
import io
from typing import List, Optional

import streamlit as st

from staffing_intel.agents.intelligence_agent import IntelligenceError, run_intelligence_agent
from staffing_intel.config import SERPAPI_KEY
from staffing_intel.schemas.posting import NormalizedPosting, SignalItem
from staffing_intel.schemas.report import IntelligenceReport

PRIORITY_BADGE = {"HIGH": "🔴 HIGH", "MEDIUM": "🟠 MEDIUM", "LOW": "🟢 LOW"}

SIGNAL_SECTIONS = (
    ("executive_changes", "Executive changes"),
    ("expansion_activity", "Expansion activity"),
    ("fda_activity", "FDA / trial activity"),
    ("other_signals", "Other signals"),
)


def _run_pipeline(company: str, location: Optional[str]) -> IntelligenceReport:
    """Run the Intelligence Agent on a fresh event loop (Streamlit reruns are synchronous)."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(run_intelligence_agent(company, location))
    finally:
        loop.close()


def _export_postings_csv(postings: List[NormalizedPosting]) -> bytes:
    """Export classified postings to CSV bytes."""
    out = io.StringIO()
    writer = csv.writer(out)
    headers = [
        "title", "company", "location", "posted_at", "posted_days_ago", "modality",
        "urgency", "contract_type", "platform", "share_link", "apply_links",
    ]
    writer.writerow(headers)
    for p in postings:
        writer.writerow([
            p.title,
            p.company,
            p.location,
            p.posted_at,
            p.posted_days_ago if p.posted_days_ago is not None else "",
            p.modality or "",
            p.urgency,
            p.contract_type or "",
            p.platform or "",
            p.share_link,
            "; ".join(a.link for a in p.apply_links if a.link),
        ])
    return out.getvalue().encode("utf-8")


def _render_signal(item: SignalItem) -> None:
    st.markdown(f"**{item.headline or 'Untitled'}** · relevance {item.relevance_score}/10")
    st.caption(f"{item.source or '—'} · {item.date}")
    if item.link:
        st.markdown(f"[Read more]({item.link})")


def _render_report(report: IntelligenceReport) -> None:
    col1, col2, col3 = st.columns(3)
    col1.metric("Overall score", f"{report.overall_score}/10")
    col2.metric("Priority", PRIORITY_BADGE.get(report.priority_level, report.priority_level))
    col3.metric("Timeline", report.actionable_timeline.replace("_", " "))

    rec = report.recommendations
    st.subheader("Recommendations")
    if rec.reasoning:
        st.markdown(f"*{rec.reasoning}*")
    for action in rec.next_actions:
        st.markdown(f"- {action}")
    if rec.talking_points:
        with st.expander("Talking points"):
            for point in rec.talking_points:
                st.markdown(f"- {point}")

    hiring = report.hiring_activity
    st.subheader("Hiring activity")
    st.markdown(
        f"**Recent postings:** {hiring.recent_postings_count} · **Urgent:** {hiring.urgent_needs}"
    )
    if hiring.modalities_hiring:
        st.markdown(" ".join(f"`{m}`" for m in hiring.modalities_hiring))
    if hiring.postings:
        st.download_button(
            "Export postings to CSV",
            data=_export_postings_csv(hiring.postings),
            file_name=f"{report.company.replace(' ', '_').lower()}_postings.csv",
            mime="text/csv",
            key="export_csv",
        )
    for posting in hiring.postings:
        with st.container():
            st.markdown("---")
            st.markdown(f"### {posting.title}")
            st.caption(f"**Location:** {posting.location} · **Posted:** {posting.posted_at}")
            tags = [t for t in (posting.modality, posting.contract_type, f"urgency: {posting.urgency}") if t]
            st.markdown(" ".join(f"`{t}`" for t in tags))
            if posting.share_link:
                st.link_button("Open Job", url=posting.share_link, type="secondary")

    st.subheader("Supplementary signals")
    for attr, label in SIGNAL_SECTIONS:
        items = getattr(report.supplementary_signals, attr)
        with st.expander(f"{label} ({len(items)})"):
            for item in items:
                _render_signal(item)

    st.subheader("Recent news")
    if not report.recent_news:
        st.caption("No recent news found.")
    for news in report.recent_news:
        st.markdown(f"**{news.headline or 'Untitled'}** · relevance {news.relevance_score}/10")
        st.caption(f"{news.source or '—'} · {news.date}")


def render_layout() -> None:
    """Streamlit page layout."""
    st.set_page_config(page_title="Healthcare Staffing Intelligence", layout="wide")
    st.title("Healthcare Staffing Intelligence")
    st.markdown("*Hiring, leadership and expansion signals scored for outreach priority.*")
    st.divider()

    with st.container():
        col1, col2 = st.columns([3, 2])
        with col1:
            company = st.text_input("Company", placeholder="e.g. Mayo Clinic", key="company")
        with col2:
            location = st.text_input("Location (optional)", placeholder="e.g. Texas", key="location")
        search_clicked = st.button("Gather intelligence", type="primary", key="search_btn")

    if "report" not in st.session_state:
        st.session_state["report"] = None
    if "error" not in st.session_state:
        st.session_state["error"] = None

    if search_clicked:
        if not company or not company.strip():
            st.session_state["error"] = "Please enter a company name."
            st.session_state["report"] = None
        elif not SERPAPI_KEY:
            st.session_state["error"] = "SERPAPI_KEY is not set. Add it to your .env file."
            st.session_state["report"] = None
        else:
            st.session_state["error"] = None
            with st.spinner("Searching jobs and news…"):
                try:
                    st.session_state["report"] = _run_pipeline(
                        company.strip(), (location or "").strip() or None
                    )
                except IntelligenceError as e:
                    st.session_state["error"] = str(e)
                    st.session_state["report"] = None

    if st.session_state.get("error"):
        st.error(st.session_state["error"])

    report: Optional[IntelligenceReport] = st.session_state.get("report")
    if report is None:
        if not st.session_state.get("error"):
            st.info("Enter a company name, then click **Gather intelligence**.")
        return
    _render_report(report)


if __name__ == "__main__":
    render_layout()
