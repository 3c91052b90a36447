"""
Report formatting for triage results
"""

from typing import List
from .models import TriageResult

SEVERITY_ICONS = {
    'fatal': '🔴',
    'warning': '🟡',
    'info': '🔵',
}

CATEGORY_COLORS = {
    'BUG': 'red',
    'INFRA': 'orange',
    'TEST': 'gray',
}

PRIORITY_COLORS = {
    'HIGH': 'red',
    'MEDIUM': 'orange',
    'LOW': 'gray',
}


def format_bytes(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.2f} KB"
    return f"{size / (1024 * 1024):.2f} MB"


def severity_icon(severity: str) -> str:
    return SEVERITY_ICONS.get(severity, SEVERITY_ICONS['info'])


def category_color(category: str) -> str:
    return CATEGORY_COLORS.get(category, 'blue')


def priority_color(priority: str) -> str:
    return PRIORITY_COLORS.get(priority, 'blue')


def humanize(value: str) -> str:
    """'intermittent_failure' -> 'Intermittent Failure' (first underscore only)"""
    words = value.replace('_', ' ', 1).split(' ')
    return ' '.join(word[:1].upper() + word[1:] for word in words)


def yes_no(flag: bool) -> str:
    return 'Yes' if flag else 'No'


def build_markdown_report(result: TriageResult) -> str:
    """
    Render a triage result as a Markdown document

    Every field of the result is included; the timeline and related
    failures sections are left out when empty.

    Args:
        result: Triage result returned by the service

    Returns:
        Markdown text
    """
    triage = result.triage
    metadata = result.metadata
    savings = result.time_savings
    classification = triage.classification
    analysis = triage.analysis
    signature = analysis.failure_signature
    recommendations = triage.recommendations

    lines: List[str] = [
        f"# Triage Report: {metadata.log_file.filename}",
        "",
        f"**{classification.category}** · **{classification.priority}** · "
        f"Confidence: {classification.confidence}% · Severity: {classification.severity}",
        "",
        f"{format_bytes(metadata.log_file.size_bytes)} · Format: {metadata.log_file.format} · "
        f"Processed in {metadata.processing_time_ms}ms",
        "",
        "## Time Savings",
        f"- Manual Triage: {savings.manual_triage_minutes} min",
        f"- Automated: {savings.automated_triage_seconds}s",
        f"- Time Saved: {savings.time_saved_minutes} min",
        f"- Efficiency Gain: {savings.efficiency_gain_percent}%",
        "",
        "## Test Information",
        f"- Test Name: {triage.test_name}",
        f"- Error Type: {triage.error_type}",
        f"- Location: `{triage.location}`",
        f"- Instance Count: {signature.instance_count}",
        "",
        "## Summary",
        triage.summary,
        "",
        "## Analysis Reasoning",
        analysis.reasoning,
        "",
    ]

    if analysis.timeline:
        lines.append("## Timeline")
        for event in analysis.timeline:
            lines.append(f"- {severity_icon(event.severity)} **{event.timestamp}** ({event.severity}): {event.event}")
        lines.append("")

    lines += [
        "## Failure Signature",
        f"- Error Message: {signature.error_message}",
        f"- Instances: {signature.instance_count}",
        f"- First Occurrence: {signature.first_occurrence}",
        f"- Pattern: `{signature.pattern}`",
        "",
        "## Context",
        f"- Test Phase: {analysis.context.test_phase}",
        f"- Subsystem: {analysis.context.subsystem}",
        f"- Security Related: {yes_no(analysis.context.security_related)}",
        "",
        "## Recommended Actions",
        f"- Owner: {recommendations.owner}",
        f"- Estimated Effort: {recommendations.estimated_effort_hours} hours",
        f"- Priority Justification: {recommendations.priority_justification}",
        "",
    ]
    for index, action in enumerate(recommendations.actions, 1):
        lines.append(f"{index}. {action}")
    if recommendations.blocking:
        lines += ["", "**⛔ Blocking Issue**"]
    lines.append("")

    if triage.related_failures:
        lines.append("## Related Failures")
        lines += [f"- {failure}" for failure in triage.related_failures]
        lines.append("")

    lines += [
        "## Impact Analysis",
        f"- Blocks Testing: {yes_no(triage.impact.blocks_testing)}",
        f"- Security Related: {yes_no(triage.impact.affects_security)}",
        f"- Reproducibility: {humanize(triage.impact.reproducibility)}",
        "",
        "## Request",
        f"- Status: {result.status}",
        f"- Message: {result.message}",
        f"- Request ID: {result.request_id}",
        f"- Model: {metadata.model_used}",
        f"- API Version: {metadata.api_version}",
        f"- Timestamp: {metadata.timestamp}",
    ]
    return "\n".join(lines) + "\n"
