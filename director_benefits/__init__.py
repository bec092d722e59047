"""Director benefits ranking: fetch, normalise and rank HMRC benefit records."""
