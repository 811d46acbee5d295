#!/usr/bin/env python3
"""
run.py
Punto de entrada principal para AI Sentinel.
Maneja los imports correctamente.
"""
import sys
from pathlib import Path

# Añadir el directorio raíz al path de Python
ROOT_DIR = Path(__file__).parent.resolve()
sys.path.insert(0, str(ROOT_DIR))

from config.gemini_config import SERVER_NAME, SERVER_PORT
from ui.app import demo


def main():
    print("🚀 Iniciando AI Sentinel...")
    print(f"👉 Abre tu navegador en: http://127.0.0.1:{SERVER_PORT}")
    demo.queue().launch(server_name=SERVER_NAME, server_port=SERVER_PORT, share=False)


if __name__ == "__main__":
    main()
