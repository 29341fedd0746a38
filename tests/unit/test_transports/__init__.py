"""Tests for the Hubitat MCP transports."""
