#!/usr/bin/env python3
"""
Script to start the Streamlit frontend
"""

import os
import subprocess
import sys

from log_triage_analyzer.config import Config

if __name__ == "__main__":
    port = os.getenv("STREAMLIT_PORT", "8501")

    print("🎨 Starting Log Triage Analyzer Frontend...")
    print(f"🌐 Frontend will be available at: http://localhost:{port}")
    print(f"📡 Triage API: {Config.TRIAGE_API_BASE_URL}")
    print("Press Ctrl+C to stop the frontend")
    print("-" * 50)

    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run",
            os.path.join(os.path.dirname(os.path.abspath(__file__)), "app.py"),
            f"--server.port={port}",
            "--server.address=0.0.0.0",
            "--server.headless=false"
        ])
    except KeyboardInterrupt:
        print("\n👋 Frontend stopped by user")
