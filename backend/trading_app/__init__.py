"""Trading app: venue access, execution gate, HTTP API and scheduling.

Everything with I/O lives here; the strategy itself is in signal_core.
"""
