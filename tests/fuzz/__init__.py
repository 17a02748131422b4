"""Fuzz testing infrastructure for scopeview.

This package contains:
- test_view_oracle: State machine fuzzer comparing ScopeView with the
  recursive ShadowScope model from tests.helpers.shadow_scope

Python 3.13+.
"""
