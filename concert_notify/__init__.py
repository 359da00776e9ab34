"""Concert Notify — match scraped shows against a listener's artists."""
