"""
Quick demo script to run the Payload Guard API locally.

This script starts a local server and shows how to make requests to it.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Payload Guard Demo")
    print("=" * 60)
    print()
    print("API Endpoints:")
    print("   - Health Check:  GET  http://localhost:8000/health")
    print("   - Validate User: POST http://localhost:8000/users")
    print("   - API Docs:           http://localhost:8000/docs")
    print()
    print("Test with curl:")
    print('   curl -X POST "http://localhost:8000/users" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"name":"Alice","email":"alice@example.com","age":15,'
          '"address":{"city":"New York","zip":12345}}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "payload_guard.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
