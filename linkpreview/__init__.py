"""Link preview service: fetches pages and extracts preview metadata."""
