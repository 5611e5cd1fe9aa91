"""Finance tracker: invoice and expense bookkeeping with a dashboard."""
