"""The resume sync pipeline: change detection, copy, git publish, deploy."""
