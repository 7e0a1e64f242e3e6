"""Bundled offline cheat sheets, keyed by category."""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple


class OfflineEntry(NamedTuple):
    command: str
    description: str
    category: str


def _sheet(category: str, *pairs: tuple[str, str]) -> tuple[OfflineEntry, ...]:
    return tuple(OfflineEntry(cmd, desc, category) for cmd, desc in pairs)


OFFLINE_SHEETS = MappingProxyType(
    {
        "git": _sheet(
            "git",
            ("git status", "Show the working tree status"),
            ("git add .", "Add all changes to staging"),
            ("git add [file]", "Add specific file to staging"),
            ('git commit -m "message"', "Commit staged changes with message"),
            ("git push", "Push commits to remote repository"),
            ("git pull", "Pull changes from remote repository"),
            ("git clone [url]", "Clone a repository"),
            ("git branch", "List all branches"),
            ("git branch [name]", "Create new branch"),
            ("git checkout [branch]", "Switch to branch"),
            ("git merge [branch]", "Merge branch into current"),
            ("git log", "Show commit history"),
            ("git diff", "Show changes"),
            ("git reset --hard HEAD", "Reset to last commit"),
            ("git rm [file]", "Remove file from working tree and index"),
            ("git rm --cached [file]", "Remove specific file from staging"),
            ("git stash", "Stash current changes"),
            ("git stash pop", "Apply stashed changes"),
        ),
        "docker": _sheet(
            "docker",
            ("docker ps", "List running containers"),
            ("docker ps -a", "List all containers"),
            ("docker run [image]", "Run a container"),
            ("docker run -it [image] bash", "Run container interactively"),
            ("docker stop [container]", "Stop container"),
            ("docker rm [container]", "Remove container"),
            ("docker rmi [image]", "Remove image"),
            ("docker build -t [name] .", "Build image from Dockerfile"),
            ("docker logs [container]", "Show container logs"),
            ("docker exec -it [container] bash", "Execute command in container"),
            ("docker pull [image]", "Pull image from registry"),
            ("docker push [image]", "Push image to registry"),
            ("docker images", "List images"),
            ("docker volume ls", "List volumes"),
            ("docker network ls", "List networks"),
        ),
        # Looked up as "kubectl", tagged as kubernetes
        "kubectl": _sheet(
            "kubernetes",
            ("kubectl get pods", "List pods"),
            ("kubectl get services", "List services"),
            ("kubectl get deployments", "List deployments"),
            ("kubectl describe pod [name]", "Describe pod"),
            ("kubectl logs [pod]", "Show pod logs"),
            ("kubectl exec -it [pod] -- bash", "Execute command in pod"),
            ("kubectl apply -f [file]", "Apply configuration"),
            ("kubectl delete pod [name]", "Delete pod"),
            ("kubectl port-forward [pod] [port]:[port]", "Port forward"),
            ("kubectl get nodes", "List nodes"),
            ("kubectl top pods", "Show pod resource usage"),
            ("kubectl rollout restart deployment [name]", "Restart deployment"),
        ),
        "linux": _sheet(
            "linux",
            ("ls -la", "List files with details"),
            ("cd [directory]", "Change directory"),
            ("pwd", "Show current directory"),
            ("mkdir [directory]", "Create directory"),
            ("rm [file]", "Remove file"),
            ("rm -rf [directory]", "Remove directory recursively"),
            ("cp [source] [dest]", "Copy file"),
            ("mv [source] [dest]", "Move/rename file"),
            ('find . -name "[pattern]"', "Find files by name"),
            ('grep "[pattern]" [file]', "Search in file"),
            ("ps aux", "List running processes"),
            ("kill [pid]", "Kill process by ID"),
            ("sudo [command]", "Run command as root"),
            ("chmod +x [file]", "Make file executable"),
            ("tar -xzf [file.tar.gz]", "Extract tar.gz file"),
            ("df -h", "Show disk usage"),
            ("free -h", "Show memory usage"),
        ),
        "npm": _sheet(
            "npm",
            ("npm install", "Install dependencies"),
            ("npm install [package]", "Install package"),
            ("npm install -g [package]", "Install package globally"),
            ("npm run [script]", "Run npm script"),
            ("npm start", "Start application"),
            ("npm test", "Run tests"),
            ("npm build", "Build application"),
            ("npm list", "List installed packages"),
            ("npm outdated", "Check for outdated packages"),
            ("npm update", "Update packages"),
            ("npm uninstall [package]", "Uninstall package"),
            ("npm init", "Initialize new project"),
            ("npm publish", "Publish package"),
        ),
        "vim": _sheet(
            "vim",
            ("i", "Enter insert mode"),
            ("Esc", "Exit insert mode"),
            (":w", "Save file"),
            (":q", "Quit vim"),
            (":wq", "Save and quit"),
            (":q!", "Quit without saving"),
            ("/[pattern]", "Search forward"),
            ("?[pattern]", "Search backward"),
            ("n", "Next search result"),
            ("N", "Previous search result"),
            ("dd", "Delete line"),
            ("yy", "Copy line"),
            ("p", "Paste"),
            ("u", "Undo"),
            ("Ctrl+r", "Redo"),
            ("gg", "Go to beginning"),
            ("G", "Go to end"),
        ),
        "python": _sheet(
            "python",
            ("python -m venv venv", "Create virtual environment"),
            ("source venv/bin/activate", "Activate virtual environment (Linux/Mac)"),
            ("venv\\Scripts\\activate", "Activate virtual environment (Windows)"),
            ("pip install [package]", "Install package"),
            ("pip install -r requirements.txt", "Install from requirements file"),
            ("pip freeze > requirements.txt", "Generate requirements file"),
            ("python -m pip list", "List installed packages"),
            (
                'python -c "import [module]; print([module].__version__)"',
                "Check module version",
            ),
            ("python -m http.server 8000", "Start simple HTTP server"),
            ("python -m json.tool file.json", "Pretty print JSON"),
            ("python -m pdb script.py", "Debug script with pdb"),
            ("python -m pytest", "Run tests with pytest"),
        ),
        "javascript": _sheet(
            "javascript",
            ("node --version", "Check Node.js version"),
            ("npm init -y", "Initialize package.json"),
            ("npm install --save [package]", "Install and save to dependencies"),
            ("npm install --save-dev [package]", "Install and save to devDependencies"),
            ("npm run [script]", "Run npm script"),
            ("npx [command]", "Execute package binary"),
            ("console.log()", "Print to console"),
            ("JSON.stringify(obj, null, 2)", "Pretty print JSON"),
            ("Object.keys(obj)", "Get object keys"),
            ("Array.from({length: n}, (_, i) => i)", "Create array of numbers"),
            ("fetch('/api/data').then(r => r.json())", "Fetch API call"),
            ("setTimeout(() => {}, 1000)", "Set timeout"),
        ),
        "powershell": _sheet(
            "powershell",
            ("Get-Help [cmdlet]", "Get help for cmdlet"),
            ("Get-Command *[keyword]*", "Find commands"),
            ("Get-Process", "List running processes"),
            ("Get-Service", "List services"),
            ("Stop-Process -Name [name]", "Stop process by name"),
            ("Start-Service [name]", "Start service"),
            ("Get-ChildItem -Recurse", "List files recursively"),
            ("Test-Path [path]", "Check if path exists"),
            ("New-Item -ItemType Directory [name]", "Create directory"),
            ("Copy-Item [source] [dest]", "Copy file/folder"),
            ("Get-Content [file]", "Read file content"),
            ("Set-Content [file] [content]", "Write to file"),
            ("Invoke-WebRequest [url]", "Make HTTP request"),
            ("ConvertTo-Json [object]", "Convert to JSON"),
        ),
        "bash": _sheet(
            "bash",
            ("echo $SHELL", "Show current shell"),
            ("which [command]", "Find command location"),
            ("history", "Show command history"),
            ("!!", "Repeat last command"),
            ("!n", "Repeat command number n"),
            ("alias ll='ls -la'", "Create alias"),
            ("export VAR=value", "Set environment variable"),
            ("echo $VAR", "Print environment variable"),
            ("for i in {1..10}; do echo $i; done", "For loop"),
            ("if [ -f file ]; then echo exists; fi", "If statement"),
            ("command1 && command2", "Run command2 if command1 succeeds"),
            ("command1 || command2", "Run command2 if command1 fails"),
            ("command > file.txt", "Redirect output to file"),
            ("command >> file.txt", "Append output to file"),
            ("command1 | command2", "Pipe output"),
        ),
        "sql": _sheet(
            "sql",
            ("SELECT * FROM table", "Select all from table"),
            ("SELECT col1, col2 FROM table WHERE condition", "Select with condition"),
            ("INSERT INTO table (col1, col2) VALUES (val1, val2)", "Insert data"),
            ("UPDATE table SET col1 = val1 WHERE condition", "Update data"),
            ("DELETE FROM table WHERE condition", "Delete data"),
            (
                "CREATE TABLE table (id INT PRIMARY KEY, name VARCHAR(50))",
                "Create table",
            ),
            ("ALTER TABLE table ADD COLUMN col_name datatype", "Add column"),
            ("DROP TABLE table", "Delete table"),
            ("SELECT COUNT(*) FROM table", "Count rows"),
            ("SELECT * FROM table ORDER BY col ASC/DESC", "Order results"),
            ("SELECT * FROM table LIMIT 10", "Limit results"),
            (
                "SELECT t1.*, t2.* FROM table1 t1 JOIN table2 t2 ON t1.id = t2.id",
                "Join tables",
            ),
        ),
        "regex": _sheet(
            "regex",
            (".", "Match any character"),
            ("*", "Match 0 or more"),
            ("+", "Match 1 or more"),
            ("?", "Match 0 or 1"),
            ("^", "Start of string"),
            ("$", "End of string"),
            ("\\d", "Match digit"),
            ("\\w", "Match word character"),
            ("\\s", "Match whitespace"),
            ("[abc]", "Match any of a, b, c"),
            ("[a-z]", "Match lowercase letter"),
            ("[0-9]", "Match digit"),
            ("(group)", "Capture group"),
            ("(?:group)", "Non-capturing group"),
            ("\\1", "Back reference to group 1"),
        ),
        "aws": _sheet(
            "aws",
            ("aws configure", "Configure AWS CLI"),
            ("aws s3 ls", "List S3 buckets"),
            ("aws s3 cp file s3://bucket/", "Upload file to S3"),
            ("aws s3 sync . s3://bucket/", "Sync directory to S3"),
            ("aws ec2 describe-instances", "List EC2 instances"),
            (
                "aws ec2 start-instances --instance-ids i-1234567890abcdef0",
                "Start EC2 instance",
            ),
            (
                "aws ec2 stop-instances --instance-ids i-1234567890abcdef0",
                "Stop EC2 instance",
            ),
            ("aws lambda list-functions", "List Lambda functions"),
            ("aws logs describe-log-groups", "List CloudWatch log groups"),
            ("aws iam list-users", "List IAM users"),
            ("aws cloudformation list-stacks", "List CloudFormation stacks"),
            ("aws rds describe-db-instances", "List RDS instances"),
        ),
        "azure": _sheet(
            "azure",
            ("az login", "Login to Azure"),
            ("az account list", "List subscriptions"),
            ("az account set --subscription [id]", "Set active subscription"),
            ("az group list", "List resource groups"),
            ("az vm list", "List virtual machines"),
            ("az vm start --name [name] --resource-group [rg]", "Start VM"),
            ("az vm stop --name [name] --resource-group [rg]", "Stop VM"),
            ("az storage account list", "List storage accounts"),
            ("az webapp list", "List web apps"),
            ("az functionapp list", "List function apps"),
            ("az keyvault list", "List key vaults"),
            ("az monitor log-analytics workspace list", "List Log Analytics workspaces"),
        ),
        "terraform": _sheet(
            "terraform",
            ("terraform init", "Initialize Terraform"),
            ("terraform plan", "Show execution plan"),
            ("terraform apply", "Apply changes"),
            ("terraform destroy", "Destroy infrastructure"),
            ("terraform validate", "Validate configuration"),
            ("terraform fmt", "Format configuration files"),
            ("terraform show", "Show current state"),
            ("terraform state list", "List resources in state"),
            ("terraform state show [resource]", "Show resource details"),
            ("terraform import [resource] [id]", "Import existing resource"),
            ("terraform workspace list", "List workspaces"),
            ("terraform workspace new [name]", "Create workspace"),
        ),
        "ansible": _sheet(
            "ansible",
            ("ansible-playbook playbook.yml", "Run playbook"),
            ("ansible-playbook playbook.yml --check", "Dry run playbook"),
            ("ansible-playbook playbook.yml --limit host", "Run on specific host"),
            ("ansible all -m ping", "Ping all hosts"),
            ("ansible all -m setup", "Gather facts"),
            ("ansible-inventory --list", "List inventory"),
            ("ansible-vault create secret.yml", "Create encrypted file"),
            ("ansible-vault edit secret.yml", "Edit encrypted file"),
            ("ansible-galaxy install role", "Install role"),
            ("ansible-config dump", "Show configuration"),
        ),
        "tmux": _sheet(
            "tmux",
            ("tmux new -s session", "Create named session"),
            ("tmux attach -t session", "Attach to session"),
            ("tmux list-sessions", "List sessions"),
            ("Ctrl+b d", "Detach from session"),
            ("Ctrl+b c", "Create new window"),
            ("Ctrl+b n", "Next window"),
            ("Ctrl+b p", "Previous window"),
            ("Ctrl+b %", "Split pane vertically"),
            ('Ctrl+b "', "Split pane horizontally"),
            ("Ctrl+b arrow", "Switch pane"),
            ("Ctrl+b x", "Close pane"),
            ("Ctrl+b z", "Zoom pane"),
        ),
    }
)
