#!/usr/bin/python3
# Launcher da calculadora, sem argumentos abre o modo interativo, com argumentos avalia uma única expressão.
import os
import sys

from navicalc.client import CalcApp, Config

NAVICALC_PATH   = os.path.dirname(os.path.abspath(__file__))
NAVICALC_CONFIG = os.path.join(NAVICALC_PATH, 'config.json')

def create_app():
    if os.path.exists(NAVICALC_CONFIG):
        return CalcApp.from_config(Config(NAVICALC_CONFIG))
    else:
        return CalcApp()

if __name__ == "__main__":
    app = create_app()

    if len(sys.argv) > 1:
        ok, output = app.evaluate_expression(' '.join(sys.argv[1:]))
        app.write(output)
        sys.exit(0 if ok else 1)
    else:
        app.run()
