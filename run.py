"""
Entry point for the computer shop demo.

Usage:
    python run.py

Takes no arguments: shows the catalog, then buys a gaming PC and an
office PC through the facade. Faults are not caught here.
"""
from computer_shop.facade import ComputerShopFacade


def main():
    shop = ComputerShopFacade()
    shop.show_catalog()
    shop.buy_gaming_pc()
    shop.buy_office_pc()


if __name__ == "__main__":
    main()
