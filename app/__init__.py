"""Host side of the counter: config -> CounterHost -> tick/status loops."""
