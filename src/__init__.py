"""Password Strength Service.

A single password-strength scoring implementation shared by a sign-up
strength meter, a REST API, a command-line checker, and a reference
harness.
"""
