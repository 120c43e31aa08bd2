"""Driving adapters: Streamlit dashboard and command-line entry points."""
