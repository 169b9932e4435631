"""Pipeline pre-deploy hook that re-validates the accessibility audit report."""

from __future__ import annotations

import json
import os
import tempfile
import zipfile

import boto3


FAILURE_GUIDE_URL = os.environ.get(
    "GUIDE_URL",
    "https://www.w3.org/WAI/WCAG21/quickref/",
)
REPORT_PATH = os.environ.get("REPORT_PATH", "artifacts/a11y-audit.json")

ORDER = ["critical", "major", "minor", "enhancement"]


def _extract_artifact(job_data: dict, target_path: str) -> dict:
    credentials = job_data["artifactCredentials"]
    session = boto3.Session(
        aws_access_key_id=credentials["accessKeyId"],
        aws_secret_access_key=credentials["secretAccessKey"],
        aws_session_token=credentials["sessionToken"],
        region_name=os.environ.get("AWS_REGION"),
    )
    s3_client = session.client("s3")

    artifact = job_data["inputArtifacts"][0]
    bucket = artifact["location"]["s3Location"]["bucketName"]
    key = artifact["location"]["s3Location"]["objectKey"]

    with tempfile.NamedTemporaryFile() as tmp_file:
        s3_client.download_file(bucket, key, tmp_file.name)
        with zipfile.ZipFile(tmp_file.name) as zipped:
            with zipped.open(target_path) as report_file:
                return json.loads(report_file.read().decode("utf-8"))


def _top_issues(report: dict, limit: int = 10) -> list[str]:
    pending = []
    for audit in report.get("audits", []):
        for issue in audit.get("issues", []):
            if not issue.get("isFixed"):
                pending.append((audit.get("fileName"), issue))
    ordered = sorted(
        pending,
        key=lambda pair: ORDER.index(pair[1].get("severity")) if pair[1].get("severity") in ORDER else len(ORDER),
    )
    highlights = []
    for file_name, issue in ordered[:limit]:
        highlights.append(
            f"[{str(issue.get('severity')).upper()}] {issue.get('type')} -> {file_name}:{issue.get('lineNumber')} ({issue.get('wcagCriteria')})"
        )
    return highlights


def build_message(report: dict) -> str:
    passed = report.get("status") == "passed"
    message_lines = [
        "Accessibility audit verification (pre-deploy hook)",
        f"Passed: {passed}",
        f"Summary: {report.get('summary', {})}",
        f"Estimated fix time: {report.get('estimatedFixTime', 'unknown')}",
    ]
    highlights = _top_issues(report)
    if highlights:
        message_lines.append("Highlights:")
        message_lines.extend(highlights)
    message_lines.append(f"Remediation: {FAILURE_GUIDE_URL}")
    return "\n".join(message_lines)


def handler(event, _context):
    job = event["CodePipeline.job"]
    job_id = job["id"]
    data = job["data"]

    client = boto3.client("codepipeline")

    try:
        report = _extract_artifact(data, REPORT_PATH)
    except Exception as exc:  # pylint: disable=broad-except
        client.put_job_failure_result(
            jobId=job_id,
            failureDetails={
                "type": "JobFailed",
                "message": f"Failed to read {REPORT_PATH}: {exc}",
            },
        )
        return

    if report.get("status") != "passed":
        client.put_job_failure_result(
            jobId=job_id,
            failureDetails={
                "type": "JobFailed",
                "message": build_message(report),
            },
        )
        return

    client.put_job_success_result(jobId=job_id, executionDetails={"summary": "Accessibility audit re-validation successful"})
