"""Tests for the Hubitat MCP tools."""
