"""Streamlit GUI for the poker hand evaluator."""
