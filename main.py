#!/usr/bin/env python3
"""
User browser - Main entry point
"""

from simple_logger import Slogger
from user_browser.ui.app import UserBrowserApp
from user_browser.config import load_config


def main():

    # Load configuration
    config = load_config()
    Slogger.configure(config["logging"].get("path"), config["logging"].get("level"))

    Slogger.log("Starting user browser...")

    # Create and run the application
    app = UserBrowserApp(config)
    app.run()

if __name__ == "__main__":
    main()
