"""ESP Telemetry — ingestion and retrieval service for ESP8266 temperature readings.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
