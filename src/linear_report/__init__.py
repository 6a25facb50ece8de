"""linear-report - weekly Markdown and HTML reports from Linear."""
