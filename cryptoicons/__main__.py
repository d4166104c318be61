"""
Allow running the package with: python -m cryptoicons

By default, rebuilds the manifest and starts the server.

Examples:
    python -m cryptoicons                    # Start the server
    python -m cryptoicons serve -p 8080      # Start the server (explicit)
    python -m cryptoicons build              # Rebuild manifest.json only
    python -m cryptoicons config             # Show effective settings
    python -m cryptoicons config --init      # Create example config file
"""

import sys


def main():
    if len(sys.argv) > 1 and sys.argv[1] == 'build':
        # Remove 'build' from argv
        sys.argv.pop(1)
        from .manifest import update_manifest
        from .user_config import load_config

        config = load_config()
        index = update_manifest(config.icons_dir, config.manifest_file, config.base_url)
        if index is None:
            print(f"✗ Manifest not written (icons directory: {config.icons_dir})")
            sys.exit(1)
        print(f"✓ Manifest updated: {index.total_icons:,} icons, {len(index.icons):,} files")
        print(f"  {config.manifest_file}")
    elif len(sys.argv) > 1 and sys.argv[1] == 'config':
        # Remove 'config' from argv
        sys.argv.pop(1)
        from .user_config import load_config

        config = load_config()

        if '--init' in sys.argv or '-i' in sys.argv:
            if config.create_example_config():
                print(f"✓ Created example configuration file at:")
                print(f"  {config.config_file_path}")
            else:
                print(f"✗ Failed to create configuration file.")
                sys.exit(1)
        else:
            print(f"Configuration file: {config.config_file_path}")
            if config.config_file_path.exists():
                print(f"Status: ✓ Found")
            else:
                print(f"Status: ✗ Not found (using defaults)")
                print(f"\nRun 'python -m cryptoicons config --init' to create one.")

            print(f"\nCurrent settings:")
            for key, value in config.as_dict().items():
                print(f"  {key}: {value}")
    else:
        if len(sys.argv) > 1 and sys.argv[1] == 'serve':
            sys.argv.pop(1)
        from .app import main as serve_main
        serve_main()


if __name__ == '__main__':
    main()
