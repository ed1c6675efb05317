"""
============================================================
 File: __init__.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Package principale di SH-Toolset: menu interattivo per
     scoprire, selezionare ed eseguire script shell.
============================================================
"""

__version__ = "1.0.0"
