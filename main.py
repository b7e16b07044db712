#!/usr/bin/env python3
"""
Entry point for the Bistro Back Office API server
"""

import os

import uvicorn
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def main():
    """Run the API with uvicorn"""
    uvicorn.run(
        "src.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("ENVIRONMENT", "development") == "development",
    )


if __name__ == "__main__":
    main()
