"""Line-in, result-out runtime."""
