"""
app.py
Lanzador para Hugging Face Spaces.
"""
from ui.app import demo

if __name__ == "__main__":
    demo.queue().launch()
