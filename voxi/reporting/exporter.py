import os
import json
import html
import tempfile
from datetime import datetime, timezone
from typing import Dict, Any

from voxi.reporting.view import InsightView

class Exporter:
    @staticmethod
    def session_dir(base_dir: str = "outputs") -> str:
        """A fresh directory under base_dir, so concurrent sessions never share report files."""
        os.makedirs(base_dir, exist_ok=True)
        return tempfile.mkdtemp(prefix="session_", dir=base_dir)

    @staticmethod
    def save(question: str, payload: Any, view: InsightView, out_dir: str = "outputs") -> Dict[str, str]:
        """
        Write analysis.json, report.csv (when the view has a table) and report.html.
        Returns {file name: path} for everything written.
        """
        os.makedirs(out_dir, exist_ok=True)
        timestamp = datetime.now(timezone.utc).isoformat()
        written = {}

        # JSON
        analysis = {
            "timestamp": timestamp,
            "question": question,
            "kind": view.kind.value,
            "response": payload,
        }
        path = os.path.join(out_dir, "analysis.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(analysis, f, indent=2, ensure_ascii=False, default=str)
        written["analysis.json"] = path

        # CSV
        if view.table is not None:
            path = os.path.join(out_dir, "report.csv")
            view.table.to_csv(path, index=False, encoding="utf-8")
            written["report.csv"] = path

        # HTML
        stats = "\n".join(
            f"<li>{html.escape(str(s.label))}: {html.escape(str(s.value))}"
            + (f" ({html.escape(str(s.caption))})" if s.caption else "") + "</li>"
            for s in view.stats
        )
        if view.table is not None:
            body = view.table.to_html(index=False, escape=True)
        else:
            body = f"<pre>{html.escape(view.raw or '')}</pre>"

        report = f"""
<html>
<head>
    <meta charset="utf-8">
    <title>Call Insights</title>
</head>
<body>
<h1>Call Insights Report</h1>
<p><b>Timestamp:</b> {timestamp}</p>

<h2>{html.escape(question)}</h2>

<ul>
{stats}
</ul>

{body}
</body>
</html>
"""
        path = os.path.join(out_dir, "report.html")
        with open(path, "w", encoding="utf-8") as f:
            f.write(report)
        written["report.html"] = path

        return written
