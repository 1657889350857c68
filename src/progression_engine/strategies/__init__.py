"""Progression strategies, discovered automatically by StrategyRegistry."""
