# faaskit

A library of helpers for working with serverless function images: copying
function and template folders, running Git and other commands, merging
`KEY=VALUE` options, choosing registry credentials, checking deployment
results, describing functions, signing invocation requests, working out log
time windows, moving fetched language templates into place and looking up
function store items.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

- `faaskit.copying`: `copy_files(src, dest)` copies a file or a whole
  directory tree and gives every copy the permission bits of its source.
  Setting the environment variable `debug` to `1` or `true` prints each step.
- `faaskit.execution`: `exec_command(temp_path, command)` runs a command in a
  directory with its output going to ours; `exec_command_with_output(command,
  skip_failure)` returns combined stdout and stderr. Failures raise
  `CommandError` (unless `skip_failure` is set). `get_git_sha()` and
  `get_git_branch()` return the short commit SHA and branch name, or `""`
  outside a Git repository.
- `faaskit.maps`: `parse_map(pairs, key_name)` turns `key=value` strings into a
  dict and raises `ValueError` on a missing `=`, empty name or empty value;
  `merge_map(base, overlay)`, `merge_slice(values, overlay)` and
  `compile_environment(envvar_opts, yaml_environment, file_environment)`
  combine options, later sources winning.
- `faaskit.registry`: `read_docker_config(config_dir=None)` reads
  `config.json` from the given directory, `$DOCKER_CONFIG` or `~/.docker`,
  filling missing credentials from a configured `docker-credential-<store>`
  helper, and returns a `DockerConfig` of `AuthConfig` entries.
  `registry_auth(config, image)` picks the credential for the registry an
  image comes from, falling back to Docker Hub.
- `faaskit.deploy`: `bad_status_code(status_code)` (anything but 200 and 202),
  `deploy_failed(status)` which raises `DeployFailedError` naming each failed
  function and its status code, and `language_exists_not_dockerfile(language)`.
- `faaskit.tls`: `check_tls_insecure(gateway, tls_insecure)` returns a warning
  for a gateway that is not HTTPS unless checks are turned off.
- `faaskit.describe`: `function_urls(gateway, function_name)` and
  `format_function_description(description)`, which renders a
  `FunctionDescription` as aligned `label: value` lines with optional labels
  and annotations.
- `faaskit.invoke`: `generate_signed_header(message, key, header_name)` gives a
  `Header=sha1=<hmac>` value; `missing_sign_flag(header, key)` tells whether
  only one of the two was given.
- `faaskit.logs`: `since_value(timestamp, duration, now=None)` picks the time
  logs should start from.
- `faaskit.templates`: `template_folder_exists`, `can_write_language` and
  `move_templates(repo_path, overwrite, template_dir="./template/")`, which
  copies each language folder under `<repo_path>/template` into the local
  template folder and reports which were skipped and which were copied.
- `faaskit.store`: `StoreItem` and `filter_store_item(items, from_store)`,
  which raises `StoreItemNotFound` when no item has the name.

## Examples

```python
from faaskit.maps import merge_slice, parse_map

print(parse_map(["canary=true"], "label"))
# {'canary': 'true'}
print(merge_slice(["a", "b"], ["b", "c"]))
# ['b', 'c', 'a']
```

```python
from faaskit.registry import AuthConfig, DockerConfig, registry_auth

config = DockerConfig(auth_configs={"registry.example.com": AuthConfig(auth="placeholder")})
print(registry_auth(config, "registry.example.com/team/fn"))
# placeholder
```

```python
from faaskit.invoke import generate_signed_header

print(generate_signed_header(b"", "", "HeaderSet"))
# HeaderSet=sha1=fbdb1d1b18aa6c08324b7d64b71fb76370690e1d
```

## What it does not do

The package is a library only and installs no command. It does not prepare
build folders from language templates or assemble and run `docker build`
command lines, it does not parse build arguments or build options, and it
has no OAuth2 login. It has no HTTP client either: it does not deploy,
list, describe or invoke functions on a gateway, fetch logs, clone template
repositories or query a function store; it only works on the data such
requests would use or return.