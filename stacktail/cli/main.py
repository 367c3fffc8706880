def main():
    from .tail import tail_stack_events

    tail_stack_events()


if __name__ == "__main__":
    main()
