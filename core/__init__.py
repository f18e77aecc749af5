"""
Core modules for the React App e2e harness.

This package contains the core components:
- HarnessConfig: Immutable harness configuration
- BrowserSession: Per-test browser session
- Exceptions: Harness error hierarchy
"""
