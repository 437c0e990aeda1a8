"""
swc_web — the SWC Platform front page.

Renders a static landing page that reports the API's health status.

Run locally:
    uvicorn swc_web.app:app --port 3000
    swc-web
"""
