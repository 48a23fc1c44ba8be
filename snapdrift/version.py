# snapdrift/version.py
# Tool version constant. Single authoritative definition.
# Referenced by run_compare.py and run_capture.py for --version output.

TOOL_VERSION: str = "1.0.0"
