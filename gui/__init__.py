"""Desktop front-end for the medical records client.

Widget code only lives in ``gui.views`` and ``gui.components``; the
controller, state and services import without a display server so they can
be exercised in headless test runs.
"""
