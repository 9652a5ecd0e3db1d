"""Server-rendered pages: login form, dashboard and the Plugin A toggle.

Plain HTML forms + redirects; no sessions and no credential checks.
"""
