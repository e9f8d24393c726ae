"""Unit tests for FlowTrans.

Tests use pytest with asyncio support and replace network calls, service clients and the
clipboard with fakes via monkeypatch.
"""
