#!/usr/bin/env python3
"""
FreshClean Backend - Main application entry point
"""
from freshclean import create_app
import os

app = create_app()

if __name__ == '__main__':
    port = int(os.getenv('PORT', 3000))
    debug = os.getenv('DEBUG', 'True').lower() == 'true'

    app.run(
        host='0.0.0.0',
        port=port,
        debug=debug
    )
