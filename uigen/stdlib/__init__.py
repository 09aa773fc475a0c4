"""Standard tools and adapters shipped with uigen."""
