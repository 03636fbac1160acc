"""HTML skeleton (head, CSS, table header) and closing markup for the dashboard."""

from typing import List

from .styles import CI_CSS_CLASSES, LEGEND_ORDER, ci_label


def generate_html_header(author: str, days: int, generated: str) -> str:
    """Generate everything up to and including the opening <tbody>."""
    return f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>PR Status Dashboard - {author}</title>
    <style>
        * {{
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }}

        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
            line-height: 1.6;
            color: #333;
            background: #f5f6fa;
            padding: 20px;
            min-height: 100vh;
        }}

        .container {{
            max-width: 1400px;
            margin: 0 auto;
        }}

        h1 {{
            color: #1f2937;
            margin-bottom: 10px;
            font-size: 2em;
        }}

        .meta {{
            display: flex;
            flex-wrap: wrap;
            gap: 16px;
            color: #666;
            font-size: 0.9em;
            margin-bottom: 30px;
        }}

        .meta .dot {{
            display: inline-block;
            width: 8px;
            height: 8px;
            border-radius: 50%;
            margin-right: 6px;
        }}

        .card {{
            background: white;
            border-radius: 8px;
            overflow-x: auto;
            box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        }}

        table {{
            width: 100%;
            border-collapse: collapse;
        }}

        thead {{
            background: #f9fafb;
        }}

        th {{
            padding: 12px 20px;
            text-align: left;
            font-weight: 600;
            text-transform: uppercase;
            font-size: 0.75em;
            letter-spacing: 0.5px;
            color: #6b7280;
        }}

        td {{
            padding: 14px 20px;
            border-bottom: 1px solid #f0f0f0;
            vertical-align: top;
        }}

        tbody tr:hover {{
            background-color: #f8f9fa;
        }}

        .pr-link {{
            color: #2563eb;
            font-weight: 600;
            text-decoration: none;
        }}

        .pr-link:hover {{
            text-decoration: underline;
        }}

        .pr-title {{
            font-weight: 500;
            color: #111827;
        }}

        .updated-relative {{
            color: #6b7280;
            font-size: 0.9em;
            white-space: nowrap;
        }}

        .updated-absolute {{
            color: #9ca3af;
            font-size: 0.75em;
        }}

        .badge {{
            display: inline-block;
            padding: 2px 10px;
            border-radius: 12px;
            font-size: 0.8em;
            font-weight: 500;
            margin: 0 4px 4px 0;
            white-space: nowrap;
            text-decoration: none;
        }}

        .repo-badge {{
            font-size: 0.85em;
            padding: 4px 12px;
        }}

        .badge-blue {{ background: #dbeafe; color: #1e40af; }}
        .badge-purple {{ background: #ede9fe; color: #5b21b6; }}
        .badge-green {{ background: #dcfce7; color: #166534; }}
        .badge-orange {{ background: #ffedd5; color: #9a3412; }}
        .badge-gray {{ background: #f3f4f6; color: #1f2937; }}
        .badge-red {{ background: #fee2e2; color: #991b1b; }}
        .badge-yellow {{ background: #fef9c3; color: #854d0e; }}

        a.badge:hover {{
            opacity: 0.8;
        }}

        .pulse {{
            animation: pulse 2s infinite;
        }}

        @keyframes pulse {{
            0%, 100% {{
                opacity: 1;
            }}
            50% {{
                opacity: 0.5;
            }}
        }}

        .no-labels {{
            color: #9ca3af;
            font-size: 0.85em;
        }}

        .ci-details {{
            color: #6b7280;
            font-size: 0.75em;
            margin-top: 4px;
        }}

        .legend {{
            display: flex;
            justify-content: center;
            flex-wrap: wrap;
            gap: 16px;
            margin-top: 30px;
            color: #6b7280;
            font-size: 0.85em;
        }}

        .legend .swatch {{
            display: inline-block;
            width: 12px;
            height: 12px;
            border-radius: 3px;
            margin-right: 6px;
            vertical-align: middle;
        }}
    </style>
</head>
<body>
    <div class="container">
        <h1>&#x1F680; PR Status Dashboard</h1>
        <div class="meta">
            <span><span class="dot" style="background: #3b82f6;"></span>Author: {author}</span>
            <span><span class="dot" style="background: #22c55e;"></span>Last {days} days</span>
            <span><span class="dot" style="background: #a855f7;"></span>Generated: {generated}</span>
        </div>

        <div class="card">
            <table>
                <thead>
                    <tr>
                        <th>PR</th>
                        <th>Repository</th>
                        <th>Title</th>
                        <th>Updated</th>
                        <th>Labels</th>
                        <th>CI Status</th>
                    </tr>
                </thead>
                <tbody>
'''


def generate_legend_html() -> str:
    """One legend entry per CI status, reusing the badge colours."""
    entries: List[str] = []
    for status in LEGEND_ORDER:
        swatch_class = CI_CSS_CLASSES[status].split()[0]
        entries.append(
            f'            <span><span class="swatch {swatch_class}"></span>{ci_label(status)}</span>'
        )
    return '\n'.join(entries)


def generate_html_footer() -> str:
    """Close the table and document, with the CI legend in between."""
    return f'''                </tbody>
            </table>
        </div>

        <div class="legend">
{generate_legend_html()}
        </div>
    </div>
</body>
</html>
'''
