"""Core signal pipeline: indicators, models, and the SMA crossover strategy.

This package contains pure business logic with no I/O dependencies
(no network, exchange, or filesystem access). The trading_app package
feeds it candles fetched from a venue and acts on the order intent it
returns.
"""
