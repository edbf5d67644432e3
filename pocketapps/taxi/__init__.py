"""In-memory taxi ride booking service with a Flask HTTP API."""