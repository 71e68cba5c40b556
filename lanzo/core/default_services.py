"""Built-in service table loaded when no registry file is configured."""

DEFAULT_SERVICES = {
    "wordpress": {
        "image": "wordpress:latest",
        "container_name": "wordpress",
        "exposed_ports": {
            "80/tcp": [{"host_port": "8000"}],
        },
        "env": [
            # resolvable through wordpress-net
            "WORDPRESS_DB_HOST=db-wordpress",
            "WORDPRESS_DB_USER=wpuser",
            "WORDPRESS_DB_PASSWORD=wppass",
            "WORDPRESS_DB_NAME=wpdb",
        ],
        "network": "wordpress-net",
        "depends_on": ["db-wordpress"],
    },
    "db-wordpress": {
        "image": "mysql:5.7",
        "container_name": "db-wordpress",
        "env": [
            "MYSQL_DATABASE=wpdb",
            "MYSQL_USER=wpuser",
            "MYSQL_PASSWORD=wppass",
            "MYSQL_ROOT_PASSWORD=rootpass",
        ],
        "volumes": [
            {"host_path": "db_data_wordpress", "container_path": "/var/lib/mysql"},
        ],
        "network": "wordpress-net",
        "restart": "always",
    },
    "wordpressstack": {
        "services": ["db-wordpress", "wordpress"],
    },
    "ollama": {
        "image": "ollama/ollama",
        "container_name": "ollama",
        "exposed_ports": {
            "11434/tcp": [{"host_port": "11434"}],
        },
        "binds": ["ollama:/root/.ollama"],
        "runtime": "nvidia",
        "post_start_cmd": ["ollama", "pull", "llama3.2:1b"],
    },
    "openwebui": {
        "image": "ghcr.io/open-webui/open-webui:main",
        "container_name": "openwebui",
        "exposed_ports": {
            "8080/tcp": [{"host_port": "3000"}],
        },
        "env": [
            "ENABLE_OLLAMA_API=True",
            "OLLAMA_BASE_URL=http://host.docker.internal:11434",
        ],
        "binds": ["ollama:/root/.ollama"],
        "runtime": "nvidia",
    },
    "localstack": {
        "image": "localstack/localstack",
        "container_name": "localstack",
        "exposed_ports": {
            "4566/tcp": [{"host_port": "4566"}],
            "4571/tcp": [{"host_port": "4571"}],
        },
        "env": [
            "SERVICES=s3,ec2",
            "GATEWAY_LISTEN=4566",
        ],
        "volumes": [
            {"host_path": "/var/run/docker.sock", "container_path": "/var/run/docker.sock"},
        ],
    },
    "ollamaweb": {
        "services": ["ollama", "openwebui"],
    },
}
