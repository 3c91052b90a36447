#!/usr/bin/env python3
"""
Streamlit frontend for Log Triage Analyzer
"""

import streamlit as st

from log_triage_analyzer.config import Config
from log_triage_analyzer.controller import UploadController
from log_triage_analyzer.models import SelectedFile, TriageResult
from log_triage_analyzer.report import (
    build_markdown_report,
    category_color,
    format_bytes,
    humanize,
    priority_color,
    severity_icon,
    yes_no,
)


def get_controller() -> UploadController:
    """One controller per browser session, kept across reruns"""
    if 'controller' not in st.session_state:
        st.session_state.controller = UploadController()
    return st.session_state.controller


def uploader_key() -> str:
    # Bumping the version gives a fresh, empty file uploader
    return f"log_upload_{st.session_state.get('uploader_version', 0)}"


def on_file_change():
    """Uploader callback: select the new file, or reset when it was removed"""
    controller = get_controller()
    uploaded = st.session_state.get(uploader_key())
    if uploaded is None:
        controller.reset()
    else:
        controller.select_file(SelectedFile.from_upload(uploaded))


def reset_analysis():
    get_controller().reset()
    st.session_state.uploader_version = st.session_state.get('uploader_version', 0) + 1


def render_upload_area(controller: UploadController):
    state = controller.state

    with st.container(border=True):
        st.subheader("📤 Upload Log File")
        st.caption(f"Select or drag and drop a {controller.suffix} file for analysis")

        st.file_uploader(
            "Log file",
            type=[controller.suffix.lstrip('.')],
            key=uploader_key(),
            on_change=on_file_change,
            label_visibility="collapsed",
            help=f"Only {controller.suffix} files are accepted"
        )

        if state.file:
            st.markdown(f"📄 **{state.file.name}** · {format_bytes(state.file.size)}")

        if state.error:
            st.error(f"**Error**\n\n{state.error}")

        analyze_clicked = st.button(
            "⏳ Analyzing..." if state.uploading else "🔍 Analyze Log File",
            type="primary",
            disabled=state.file is None or state.uploading,
            use_container_width=True
        )

    if analyze_clicked:
        with st.spinner("🔄 Analyzing log file..."):
            outcome = controller.submit()
        if outcome is not None:
            st.rerun()


def render_triage_result(result: TriageResult):
    """Read-only view of every field in the triage result"""
    triage = result.triage
    metadata = result.metadata
    classification = triage.classification
    analysis = triage.analysis
    recommendations = triage.recommendations

    # Header
    col1, col2 = st.columns([3, 1])
    with col1:
        st.subheader(metadata.log_file.filename)
        st.caption(
            f"{format_bytes(metadata.log_file.size_bytes)} • Confidence: {classification.confidence}% • "
            f"Processed in {metadata.processing_time_ms}ms"
        )
    with col2:
        st.markdown(
            f":{category_color(classification.category)}[**{classification.category}**]  "
            f":{priority_color(classification.priority)}[**{classification.priority}**]"
        )
        st.caption(f"Severity: {classification.severity}")

    # Time savings
    with st.container(border=True):
        st.markdown("#### ⏱️ Time Savings")
        savings = result.time_savings
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Manual Triage", f"{savings.manual_triage_minutes} min")
        c2.metric("Automated", f"{savings.automated_triage_seconds}s")
        c3.metric("Time Saved", f"{savings.time_saved_minutes} min")
        c4.metric("Efficiency Gain", f"{savings.efficiency_gain_percent}%")

    # Test information
    with st.container(border=True):
        st.markdown("#### 🧪 Test Information")
        st.markdown(f"**Test Name**  \n{triage.test_name}")
        st.markdown(f"**Error Type**  \n{triage.error_type}")
        st.markdown(f"**Location**  \n`{triage.location}`")
        st.markdown(f"**Instance Count**  \n{analysis.failure_signature.instance_count}")

    with st.container(border=True):
        st.markdown("#### 📝 Summary")
        st.markdown(triage.summary)

    with st.container(border=True):
        st.markdown("#### 🧠 Analysis Reasoning")
        st.text(analysis.reasoning)

    if analysis.timeline:
        with st.container(border=True):
            st.markdown("#### 🕒 Timeline")
            for event in analysis.timeline:
                st.markdown(f"{severity_icon(event.severity)} **{event.timestamp}**  \n{event.event}")

    with st.container(border=True):
        st.markdown("#### 🔎 Failure Signature")
        signature = analysis.failure_signature
        st.markdown(f"**Error Message**  \n{signature.error_message}")
        st.markdown(f"**First Occurrence**  \n{signature.first_occurrence}")
        st.markdown(f"**Pattern**  \n`{signature.pattern}`")
        c1, c2, c3 = st.columns(3)
        c1.markdown(f"**Test Phase**  \n{analysis.context.test_phase}")
        c2.markdown(f"**Subsystem**  \n{analysis.context.subsystem}")
        c3.markdown(f"**Security Related**  \n{yes_no(analysis.context.security_related)}")

    # Recommendations
    with st.container(border=True):
        st.markdown("#### ✅ Recommended Actions")
        st.markdown(f"**Owner**  \n{recommendations.owner}")
        st.markdown(f"**Estimated Effort**  \n{recommendations.estimated_effort_hours} hours")
        st.markdown(f"**Priority Justification**  \n{recommendations.priority_justification}")
        st.markdown("**Actions**")
        st.markdown("\n".join(f"{i}. {action}" for i, action in enumerate(recommendations.actions, 1)))
        if recommendations.blocking:
            st.error("⛔ Blocking Issue")

    if triage.related_failures:
        with st.container(border=True):
            st.markdown("#### 🔗 Related Failures")
            st.markdown("\n".join(f"- {failure}" for failure in triage.related_failures))

    with st.container(border=True):
        st.markdown("#### 💥 Impact Analysis")
        c1, c2, c3 = st.columns(3)
        c1.markdown(f"**Blocks Testing**  \n{yes_no(triage.impact.blocks_testing)}")
        c2.markdown(f"**Security Related**  \n{yes_no(triage.impact.affects_security)}")
        c3.markdown(f"**Reproducibility**  \n{humanize(triage.impact.reproducibility)}")

    with st.expander("📋 Request Details"):
        st.text(f"Status: {result.status}")
        st.text(f"Message: {result.message}")
        st.text(f"Request ID: {result.request_id}")
        st.text(f"Model: {metadata.model_used}")
        st.text(f"API Version: {metadata.api_version}")
        st.text(f"Timestamp: {metadata.timestamp}")
        st.text(f"Detected Format: {metadata.log_file.format}")


def main():
    st.set_page_config(
        page_title="Log File Triage Analyzer",
        page_icon="🔍",
        layout="centered"
    )

    st.title("🔍 Log File Triage Analyzer")
    st.markdown("Upload a .log file to get AI-powered triage analysis")

    controller = get_controller()

    with st.sidebar:
        st.header("⚙️ Configuration")
        st.text(f"Endpoint: {controller.client.endpoint}")
        timeout = controller.client.timeout
        st.text(f"Timeout: {f'{timeout}s' if timeout else 'none'}")
        st.text(f"Accepted suffix: {controller.suffix}")
        st.caption(f"Log level: {Config.LOG_LEVEL}")

    result = controller.state.result
    if result is None:
        render_upload_area(controller)
        return

    col1, col2 = st.columns([3, 1])
    with col1:
        st.header("📊 Analysis Results")
    with col2:
        st.button("📤 Analyze Another File", on_click=reset_analysis, use_container_width=True)

    render_triage_result(result)

    st.download_button(
        label="📥 Download Report",
        data=build_markdown_report(result),
        file_name=f"triage_{result.request_id}.md",
        mime="text/markdown",
        help="Download the triage result as a Markdown report"
    )


if __name__ == "__main__":
    main()
