"""Application layer: calculator facades and the custom activity catalog."""
