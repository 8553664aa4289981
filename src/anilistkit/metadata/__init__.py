"""AniList lookups, list updates and progress tracking."""
