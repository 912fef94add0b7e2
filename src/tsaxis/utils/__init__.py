"""Shared configuration, logging, errors, granularity table and time helpers."""
