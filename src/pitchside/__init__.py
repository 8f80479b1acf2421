"""Soccer lineup manager: roster, formations, share views and ratings."""
