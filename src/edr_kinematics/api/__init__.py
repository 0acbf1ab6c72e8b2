"""HTTP interface for the EDR analysis engine."""
