"""Blog RSS bridge: turns a blog listing page into an RSS 2.0 feed."""
