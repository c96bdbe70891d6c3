"""
Vercel serverless function entry point.
This file exposes the FastAPI app for Vercel deployment.
"""

import sys
from pathlib import Path

# Vercel runs from the api/ directory; make the barload package importable
root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path))

from barload.main import app  # noqa: E402,F401
